"""
Domain models и value objects.

Элементы Q(n) и D(n), маркер бесконечных величин.
"""

from quaternion_group.domain.bounds import INFINITE, Count, Unbounded, is_infinite
from quaternion_group.domain.dihedral import (
    DihedralElement,
    DihedralKind,
    dihedral_cardinality,
    dihedral_identity,
    dihedral_inverse,
    dihedral_multiply,
    dihedral_order_of,
    reflection,
    rotation,
)
from quaternion_group.domain.element import ElementKind, QuaternionElement, a, xa

__all__ = [
    # Bounds
    "INFINITE",
    "Count",
    "Unbounded",
    "is_infinite",
    # Quaternion element
    "ElementKind",
    "QuaternionElement",
    "a",
    "xa",
    # Dihedral element
    "DihedralElement",
    "DihedralKind",
    "rotation",
    "reflection",
    "dihedral_identity",
    "dihedral_multiply",
    "dihedral_inverse",
    "dihedral_order_of",
    "dihedral_cardinality",
]
