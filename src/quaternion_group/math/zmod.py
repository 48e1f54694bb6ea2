"""
ZMod — Modular Integer Substrate

Кольцо вычетов Z/mZ для индексов элементов групп.

Модуль различает два варианта модуля:
- Finite(m), m > 0: значения всегда приведены в [0, m)
- Unbounded (m = 0): Z/0Z = Z, значения хранятся как точные целые

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение ZMod всегда приведено через Modulus.reduce
2. ZMod immutable: арифметика возвращает новый экземпляр
3. Операции над вычетами с разными модулями запрещены (ValueError)
4. Отрицательный или нецелый модуль → InvalidModulus
"""

from enum import Enum
from typing import Any, Final, Union

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Модуль 0 кодирует Unbounded вариант (Z/0Z = Z)
UNBOUNDED_MODULUS: Final[int] = 0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidModulus(ValueError):
    """
    Недопустимый модуль: отрицательный, bool или не целое число.

    Возникает при конструировании вычета или элемента группы.
    """

    pass


def validate_modulus(value: Any, name: str = "modulus") -> int:
    """
    Валидация модуля (или параметра группы n).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidModulus: Если value не целое неотрицательное число
    """
    # bool — подкласс int, но True/False как модуль почти всегда ошибка
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidModulus(f"{name} must be a non-negative integer, got {value!r}")

    if value < 0:
        raise InvalidModulus(f"{name} must be non-negative, got {value}")

    return value


# =============================================================================
# MODULUS
# =============================================================================


class ModulusKind(str, Enum):
    """Вариант модуля"""

    FINITE = "finite"
    UNBOUNDED = "unbounded"


class Modulus(BaseModel):
    """
    Модуль кольца вычетов.

    size > 0 → Finite(size), size == 0 → Unbounded.
    """

    size: int = Field(..., ge=0, description="Размер кольца (0 = Unbounded)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, size: int) -> "Modulus":
        return cls(size=validate_modulus(size))

    @classmethod
    def unbounded(cls) -> "Modulus":
        return cls(size=UNBOUNDED_MODULUS)

    @property
    def kind(self) -> ModulusKind:
        if self.size == UNBOUNDED_MODULUS:
            return ModulusKind.UNBOUNDED
        return ModulusKind.FINITE

    @property
    def is_finite(self) -> bool:
        return self.kind is ModulusKind.FINITE

    def reduce(self, value: int) -> int:
        """
        Приведение целого по модулю.

        Args:
            value: Произвольное целое

        Returns:
            value % size для Finite, value без изменений для Unbounded
        """
        if self.is_finite:
            return value % self.size
        return value


# =============================================================================
# ZMOD
# =============================================================================


class ZMod(BaseModel):
    """
    Вычет по модулю m.

    Immutable модель (frozen=True). Значение приводится при создании,
    поэтому ZMod(value=7, modulus=4) == ZMod(value=3, modulus=4).

    Examples:
        >>> ZMod.of(7, 4).value
        3
        >>> (ZMod.of(1, 4) - ZMod.of(2, 4)).value
        3
        >>> ZMod.of(-5, 0).value
        -5
    """

    value: int = Field(..., description="Представитель вычета")
    modulus: int = Field(..., ge=0, description="Модуль (0 = кольцо Z)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def reduce_value(self) -> "ZMod":
        # После lax-коэрсии ("7", 7.0 → 7), поэтому приводится любой вход
        reduced = Modulus(size=self.modulus).reduce(self.value)
        if reduced != self.value:
            object.__setattr__(self, "value", reduced)
        return self

    @classmethod
    def of(cls, value: int, modulus: int) -> "ZMod":
        """
        Конверсия целого в Z/mZ (аналог natCast / intCast).

        Raises:
            InvalidModulus: Если модуль отрицательный или не целый
        """
        modulus = validate_modulus(modulus)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"ZMod value must be an integer, got {value!r}")
        return cls(value=Modulus(size=modulus).reduce(value), modulus=modulus)

    @property
    def ring(self) -> Modulus:
        return Modulus(size=self.modulus)

    @property
    def val(self) -> int:
        """
        Канонический неотрицательный представитель.

        Для m > 0 — значение в [0, m); для m = 0 — |value|.
        """
        if self.ring.is_finite:
            return self.value
        return abs(self.value)

    def _coerce(self, other: Union["ZMod", int], op: str) -> int:
        if isinstance(other, ZMod):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"Operator `{op}` cannot be applied to residues of unequal moduli "
                    f"{self.modulus} and {other.modulus}"
                )
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise ValueError(f"Cannot apply `{op}` to {self!r} and {other!r}")

    def _make(self, value: int) -> "ZMod":
        return ZMod(value=self.ring.reduce(value), modulus=self.modulus)

    def __add__(self, other: Union["ZMod", int]) -> "ZMod":
        return self._make(self.value + self._coerce(other, "+"))

    def __radd__(self, other: int) -> "ZMod":
        return self._make(self._coerce(other, "+") + self.value)

    def __sub__(self, other: Union["ZMod", int]) -> "ZMod":
        return self._make(self.value - self._coerce(other, "-"))

    def __rsub__(self, other: int) -> "ZMod":
        return self._make(self._coerce(other, "-") - self.value)

    def __mul__(self, other: Union["ZMod", int]) -> "ZMod":
        return self._make(self.value * self._coerce(other, "*"))

    def __rmul__(self, other: int) -> "ZMod":
        return self._make(self._coerce(other, "*") * self.value)

    def __neg__(self) -> "ZMod":
        return self._make(-self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
