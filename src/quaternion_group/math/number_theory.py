"""
Number Theory — gcd / lcm / cyclic order

Целочисленные примитивы для формул порядка и экспоненты.

Соглашения (как в Nat.gcd / Nat.lcm):
- gcd(m, 0) = m, gcd(0, 0) = 0
- lcm(m, 0) = 0
"""

import math


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель неотрицательных целых.

    Examples:
        >>> gcd(12, 8)
        4
        >>> gcd(6, 0)
        6
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd expects non-negative integers, got {a}, {b}")
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное неотрицательных целых.

    Examples:
        >>> lcm(3, 2)
        6
        >>> lcm(4, 2)
        4
        >>> lcm(5, 0)
        0
    """
    if a < 0 or b < 0:
        raise ValueError(f"lcm expects non-negative integers, got {a}, {b}")
    return math.lcm(a, b)


def cyclic_order(k: int, m: int) -> int:
    """
    Порядок вычета k в аддитивной группе Z/mZ.

    order = m / gcd(m, k), k — канонический представитель в [0, m).
    При k = 0: gcd(m, 0) = m → порядок 1.

    Args:
        k: Представитель вычета в [0, m)
        m: Модуль (> 0)

    Returns:
        Порядок (делитель m)

    Raises:
        ValueError: Если m <= 0 или k вне [0, m)

    Examples:
        >>> cyclic_order(1, 6)
        6
        >>> cyclic_order(4, 6)
        3
        >>> cyclic_order(0, 6)
        1
    """
    if m <= 0:
        raise ValueError(f"cyclic_order expects a positive modulus, got {m}")
    if not 0 <= k < m:
        raise ValueError(f"cyclic_order expects k in [0, {m}), got {k}")
    return m // gcd(m, k)
