"""
Generalized quaternion group Q(n) of order 4n.

Элементы A(i) = a^i и XA(i) = x a^i, i ∈ Z/2nZ; групповые операции,
порядки элементов, экспонента и изоморфизм вырожденной Q(0) с D∞.
"""

from quaternion_group.domain import (
    INFINITE,
    DihedralElement,
    DihedralKind,
    ElementKind,
    QuaternionElement,
    Unbounded,
    a,
    reflection,
    rotation,
    xa,
)
from quaternion_group.group import (
    GroupMismatch,
    UnboundedEnumeration,
    a_one_pow,
    cardinality,
    cayley_table,
    element_index,
    elements,
    identity,
    inverse,
    multiply,
    power,
)
from quaternion_group.isomorphism import (
    from_dihedral_infinite,
    to_dihedral_infinite,
    verify_homomorphism,
)
from quaternion_group.math import InvalidModulus, ZMod
from quaternion_group.order import (
    brute_force_order,
    cyclic_generator,
    exponent,
    exponent_from_orders,
    is_cyclic,
    order_of,
)

__all__ = [
    # Types
    "ZMod",
    "QuaternionElement",
    "ElementKind",
    "DihedralElement",
    "DihedralKind",
    "Unbounded",
    "INFINITE",
    # Exceptions
    "InvalidModulus",
    "UnboundedEnumeration",
    "GroupMismatch",
    # Constructors
    "a",
    "xa",
    "rotation",
    "reflection",
    # Group operations
    "identity",
    "multiply",
    "inverse",
    "power",
    "a_one_pow",
    # Cardinality
    "cardinality",
    "elements",
    "element_index",
    "cayley_table",
    # Order / exponent
    "order_of",
    "brute_force_order",
    "exponent",
    "exponent_from_orders",
    "is_cyclic",
    "cyclic_generator",
    # Isomorphism
    "to_dihedral_infinite",
    "from_dihedral_infinite",
    "verify_homomorphism",
]
