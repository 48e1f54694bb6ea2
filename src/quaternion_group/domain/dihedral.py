"""
DihedralElement — Диэдральная группа D(n) порядка 2n

Элементы:
- r(i)  — поворот, i ∈ Z/nZ
- sr(i) — отражение, i ∈ Z/nZ

Таблица умножения:
    r(i)  * r(j)  = r(i + j)
    r(i)  * sr(j) = sr(j - i)
    sr(i) * r(j)  = sr(i + j)
    sr(i) * sr(j) = r(j - i)

При n = 0 индекс из Z/0Z = Z — бесконечная диэдральная группа D∞,
с которой сравнивается вырожденная Q(0).
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from quaternion_group.domain.bounds import INFINITE, Count
from quaternion_group.math.number_theory import cyclic_order
from quaternion_group.math.zmod import ZMod, validate_modulus


# =============================================================================
# ENUMS
# =============================================================================


class DihedralKind(str, Enum):
    """Вариант элемента D(n)"""

    ROTATION = "r"
    REFLECTION = "sr"


# =============================================================================
# ELEMENT MODEL
# =============================================================================


class DihedralElement(BaseModel):
    """Элемент D(n). Инвариант: index.modulus == n."""

    n: int = Field(..., ge=0, description="Параметр группы (|D(n)| = 2n)")
    kind: DihedralKind = Field(..., description="Поворот или отражение")
    index: ZMod = Field(..., description="Индекс в Z/nZ")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_index_ring(self) -> "DihedralElement":
        if self.index.modulus != self.n:
            raise ValueError(
                f"index modulus {self.index.modulus} does not match n = {self.n}"
            )
        return self

    @property
    def is_rotation(self) -> bool:
        return self.kind is DihedralKind.ROTATION

    @property
    def is_reflection(self) -> bool:
        return self.kind is DihedralKind.REFLECTION

    def __str__(self) -> str:
        return f"{self.kind.value}({self.index.value})"


def rotation(n: int, i: int) -> DihedralElement:
    """Конструктор r(i) в D(n)."""
    n = validate_modulus(n, name="n")
    return DihedralElement(n=n, kind=DihedralKind.ROTATION, index=ZMod.of(i, n))


def reflection(n: int, i: int) -> DihedralElement:
    """Конструктор sr(i) в D(n)."""
    n = validate_modulus(n, name="n")
    return DihedralElement(n=n, kind=DihedralKind.REFLECTION, index=ZMod.of(i, n))


# =============================================================================
# ГРУППОВЫЕ ОПЕРАЦИИ
# =============================================================================


def dihedral_identity(n: int) -> DihedralElement:
    """Нейтральный элемент r(0)."""
    return rotation(n, 0)


def dihedral_multiply(x: DihedralElement, y: DihedralElement) -> DihedralElement:
    """
    Произведение x * y в D(n).

    Raises:
        ValueError: Если x и y из групп с разным n
    """
    if x.n != y.n:
        raise ValueError(f"Cannot multiply elements of D({x.n}) and D({y.n})")

    i, j = x.index, y.index

    if x.is_rotation and y.is_rotation:
        return DihedralElement(n=x.n, kind=DihedralKind.ROTATION, index=i + j)
    if x.is_rotation:
        return DihedralElement(n=x.n, kind=DihedralKind.REFLECTION, index=j - i)
    if y.is_rotation:
        return DihedralElement(n=x.n, kind=DihedralKind.REFLECTION, index=i + j)
    return DihedralElement(n=x.n, kind=DihedralKind.ROTATION, index=j - i)


def dihedral_inverse(x: DihedralElement) -> DihedralElement:
    """
    Обратный элемент: r(i)^-1 = r(-i), sr(i)^-1 = sr(i).
    """
    if x.is_rotation:
        return DihedralElement(n=x.n, kind=DihedralKind.ROTATION, index=-x.index)
    return x


def dihedral_cardinality(n: int) -> Count:
    """
    Порядок D(n): 2n, либо INFINITE для D∞ (n = 0).
    """
    n = validate_modulus(n, name="n")
    if n == 0:
        return INFINITE
    return 2 * n


def dihedral_order_of(x: DihedralElement) -> Count:
    """
    Порядок элемента D(n).

    - sr(i): 2 (для любого n, включая D∞)
    - r(i), n > 0: n / gcd(n, i)
    - r(i), n = 0: 1 при i = 0, иначе INFINITE
    """
    if x.is_reflection:
        return 2
    if x.n == 0:
        return 1 if x.index.value == 0 else INFINITE
    return cyclic_order(x.index.val, x.n)
