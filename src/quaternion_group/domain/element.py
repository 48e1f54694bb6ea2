"""
QuaternionElement — Элемент обобщённой группы кватернионов Q(n)

Q(n) порождается a и x с соотношениями:
    a^(2n) = 1,  x^2 = a^n,  x^-1 a x = a^-1

Каждый элемент — ровно один из двух вариантов:
- A(i)  = a^i,      i ∈ Z/2nZ
- XA(i) = x * a^i,  i ∈ Z/2nZ

При n > 0 носитель конечен (4n элементов). При n = 0 индекс берётся из
Z/0Z = Z и группа бесконечна (изоморфна бесконечной диэдральной группе).

Immutable Pydantic модель, равенство структурное (вариант + вычет).
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from quaternion_group.math.zmod import ZMod, validate_modulus


# =============================================================================
# ENUMS
# =============================================================================


class ElementKind(str, Enum):
    """Вариант элемента Q(n)"""

    A = "a"
    XA = "xa"


# =============================================================================
# ELEMENT MODEL
# =============================================================================


class QuaternionElement(BaseModel):
    """
    Элемент Q(n).

    Инвариант: index.modulus == 2n.
    Все операции создают новый экземпляр (frozen=True).
    """

    n: int = Field(..., ge=0, description="Параметр группы (|Q(n)| = 4n)")
    kind: ElementKind = Field(..., description="Вариант элемента (a / xa)")
    index: ZMod = Field(..., description="Индекс в Z/2nZ")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_index_ring(self) -> "QuaternionElement":
        if self.index.modulus != 2 * self.n:
            raise ValueError(
                f"index modulus {self.index.modulus} does not match 2n = {2 * self.n}"
            )
        return self

    @property
    def modulus(self) -> int:
        """Модуль индекса: 2n"""
        return 2 * self.n

    @property
    def is_a(self) -> bool:
        return self.kind is ElementKind.A

    @property
    def is_xa(self) -> bool:
        return self.kind is ElementKind.XA

    @property
    def is_finite_group(self) -> bool:
        return self.n > 0

    def __str__(self) -> str:
        return f"{self.kind.value}({self.index.value})"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def a(n: int, i: int) -> QuaternionElement:
    """
    Конструктор A(i) = a^i в Q(n).

    Args:
        n: Параметр группы (>= 0)
        i: Любое целое, приводится по модулю 2n

    Raises:
        InvalidModulus: Если n отрицательный или не целый

    Examples:
        >>> str(a(3, 7))
        'a(1)'
    """
    n = validate_modulus(n, name="n")
    return QuaternionElement(n=n, kind=ElementKind.A, index=ZMod.of(i, 2 * n))


def xa(n: int, i: int) -> QuaternionElement:
    """
    Конструктор XA(i) = x * a^i в Q(n).

    Args:
        n: Параметр группы (>= 0)
        i: Любое целое, приводится по модулю 2n

    Raises:
        InvalidModulus: Если n отрицательный или не целый

    Examples:
        >>> str(xa(2, -1))
        'xa(3)'
    """
    n = validate_modulus(n, name="n")
    return QuaternionElement(n=n, kind=ElementKind.XA, index=ZMod.of(i, 2 * n))
