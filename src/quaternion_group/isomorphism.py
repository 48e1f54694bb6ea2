"""
Degenerate Isomorphism — Q(0) ≅ D∞

При n = 0 индексы обеих групп лежат в Z/0Z = Z, и формулы умножения
совпадают после переименования:
    A(j)  ↔ r(j)   (Rotation)
    XA(j) ↔ sr(j)  (Reflection)

Для n > 0 отображение не определено (|Q(n)| = 4n, |D(n)| = 2n).
"""

from itertools import product
from typing import Iterable

from quaternion_group.domain.dihedral import (
    DihedralElement,
    DihedralKind,
    dihedral_inverse,
    dihedral_multiply,
)
from quaternion_group.domain.element import ElementKind, QuaternionElement
from quaternion_group.group import inverse, multiply
from quaternion_group.logging import get_logger

logger = get_logger(__name__)

_TO_DIHEDRAL = {
    ElementKind.A: DihedralKind.ROTATION,
    ElementKind.XA: DihedralKind.REFLECTION,
}
_FROM_DIHEDRAL = {v: k for k, v in _TO_DIHEDRAL.items()}


def to_dihedral_infinite(x: QuaternionElement) -> DihedralElement:
    """
    Отображение Q(0) → D∞.

    Raises:
        ValueError: Если x не из Q(0)
    """
    if x.n != 0:
        raise ValueError(f"to_dihedral_infinite is defined only for Q(0), got Q({x.n})")
    return DihedralElement(n=0, kind=_TO_DIHEDRAL[x.kind], index=x.index)


def from_dihedral_infinite(d: DihedralElement) -> QuaternionElement:
    """
    Обратное отображение D∞ → Q(0).

    Raises:
        ValueError: Если d не из D∞
    """
    if d.n != 0:
        raise ValueError(f"from_dihedral_infinite is defined only for D(0), got D({d.n})")
    return QuaternionElement(n=0, kind=_FROM_DIHEDRAL[d.kind], index=d.index)


def verify_homomorphism(samples: Iterable[QuaternionElement]) -> bool:
    """
    Проверка, что to_dihedral_infinite — изоморфизм на выборке.

    Для всех x, y из samples:
    1. φ(x * y) == φ(x) * φ(y)
    2. φ(x^-1) == φ(x)^-1
    3. φ^-1(φ(x)) == x

    Args:
        samples: Элементы Q(0)

    Returns:
        True если все проверки прошли; первый контрпример пишется в лог
    """
    points = list(samples)

    for x in points:
        image = to_dihedral_infinite(x)
        if from_dihedral_infinite(image) != x:
            logger.warning("round trip failed for %s", x)
            return False
        if to_dihedral_infinite(inverse(x)) != dihedral_inverse(image):
            logger.warning("inverse not preserved for %s", x)
            return False

    for x, y in product(points, repeat=2):
        lhs = to_dihedral_infinite(multiply(x, y))
        rhs = dihedral_multiply(to_dihedral_infinite(x), to_dihedral_infinite(y))
        if lhs != rhs:
            logger.warning("product not preserved: %s * %s -> %s vs %s", x, y, lhs, rhs)
            return False

    logger.debug("homomorphism verified on %d samples", len(points))
    return True
