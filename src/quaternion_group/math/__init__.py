"""
Math primitives для quaternion_group

Кольцо вычетов Z/mZ (включая вырожденный случай Z/0Z = Z) и
теоретико-числовые функции для порядков элементов.
"""

# Modular Integer Substrate
from quaternion_group.math.zmod import (
    UNBOUNDED_MODULUS,
    InvalidModulus,
    Modulus,
    ModulusKind,
    ZMod,
    validate_modulus,
)

# Number Theory
from quaternion_group.math.number_theory import (
    cyclic_order,
    gcd,
    lcm,
)

__all__ = [
    # ZMod — Constants
    "UNBOUNDED_MODULUS",
    # ZMod — Exceptions
    "InvalidModulus",
    # ZMod — Types
    "Modulus",
    "ModulusKind",
    "ZMod",
    # ZMod — Functions
    "validate_modulus",
    # Number Theory
    "cyclic_order",
    "gcd",
    "lcm",
]
