"""
Order & Exponent — Порядки элементов и экспонента Q(n)

Формулы (n > 0):
    order(A(i))  = 2n / gcd(2n, i.val)     (order(A(0)) = 1)
    order(XA(i)) = 4                        (XA(i)^2 = A(n), XA(i)^4 = 1)
    exponent(Q(n)) = 2 * lcm(n, 2)

Вырожденный случай n = 0 (Q(0) ≅ D∞):
    order(A(0))  = 1
    order(A(i))  = INFINITE при i != 0
    order(XA(i)) = 2                        (XA(i)^2 = A(0))
    exponent(Q(0)) = INFINITE

Бесконечный порядок — отдельный вариант результата (Unbounded.INFINITE),
а не 0: 0 никогда не возвращается как порядок или экспонента.

Перебор (brute_force_order) ограничен 4n итерациями и используется только
для перекрёстной проверки формул.
"""

from functools import reduce
from typing import Final, Optional

from quaternion_group.domain.bounds import INFINITE, Count
from quaternion_group.domain.element import QuaternionElement
from quaternion_group.group import (
    CARDINALITY_FACTOR,
    cardinality,
    elements,
    identity,
    multiply,
)
from quaternion_group.logging import get_logger
from quaternion_group.math.number_theory import cyclic_order, lcm
from quaternion_group.math.zmod import validate_modulus

logger = get_logger(__name__)

# Порядок XA(i) в конечной Q(n)
XA_ORDER_FINITE: Final[int] = 4

# Порядок XA(i) в Q(0): XA(i)^2 = A(0)
XA_ORDER_DEGENERATE: Final[int] = 2

# Верхняя граница перебора: BRUTE_FORCE_ORDER_FACTOR * n итераций
BRUTE_FORCE_ORDER_FACTOR: Final[int] = CARDINALITY_FACTOR


# =============================================================================
# ORDER
# =============================================================================


def order_of(x: QuaternionElement) -> Count:
    """
    Порядок элемента Q(n) по замкнутой формуле.

    Args:
        x: Элемент Q(n)

    Returns:
        Положительное целое или INFINITE

    Examples:
        >>> order_of(a(4, 1))
        8
        >>> order_of(a(4, 6))
        4
        >>> order_of(xa(5, 3))
        4
        >>> order_of(a(0, 1))
        <Unbounded.INFINITE: 'infinite'>
    """
    if x.is_xa:
        return XA_ORDER_FINITE if x.n > 0 else XA_ORDER_DEGENERATE

    if x.n == 0:
        return 1 if x.index.value == 0 else INFINITE

    return cyclic_order(x.index.val, x.modulus)


def brute_force_order(x: QuaternionElement, limit: Optional[int] = None) -> Count:
    """
    Порядок перебором степеней x, x^2, ... (только для проверки).

    Args:
        x: Элемент Q(n)
        limit: Максимум итераций. По умолчанию 4n; для n = 0 обязателен.
               Не может превышать 4n при n > 0.

    Returns:
        Наименьшее k <= limit с x^k = 1, иначе INFINITE

    Raises:
        ValueError: Если limit не задан для n = 0, не положительный,
                    или превышает 4n при n > 0
    """
    bound = BRUTE_FORCE_ORDER_FACTOR * x.n
    if limit is None:
        if x.n == 0:
            raise ValueError("brute_force_order requires an explicit limit for Q(0)")
        limit = bound
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    if x.n > 0 and limit > bound:
        raise ValueError(f"limit {limit} exceeds the 4n = {bound} iteration bound")

    one = identity(x.n)
    current = x
    for k in range(1, limit + 1):
        if current == one:
            logger.debug("brute_force_order(%s) in Q(%d) = %d", x, x.n, k)
            return k
        current = multiply(current, x)

    logger.debug("brute_force_order(%s) in Q(%d): no return to identity in %d steps", x, x.n, limit)
    return INFINITE


# =============================================================================
# EXPONENT
# =============================================================================


def exponent(n: int) -> Count:
    """
    Экспонента Q(n): НОК порядков всех элементов.

    exponent = 2 * lcm(n, 2) для n > 0, INFINITE для n = 0.

    Examples:
        >>> exponent(1)
        4
        >>> exponent(3)
        12
        >>> exponent(4)
        8
    """
    n = validate_modulus(n, name="n")
    if n == 0:
        return INFINITE
    return 2 * lcm(n, 2)


def exponent_from_orders(n: int) -> Count:
    """
    Экспонента как НОК order_of по всем элементам (перекрёстная проверка).

    Для n = 0 возвращает INFINITE без перечисления.
    """
    if cardinality(n) is INFINITE:
        return INFINITE
    result = reduce(lcm, (order_of(x) for x in elements(n)), 1)
    logger.debug("exponent_from_orders(%d) = %d", n, result)
    return result


# =============================================================================
# CYCLICITY
# =============================================================================


def cyclic_generator(n: int) -> Optional[QuaternionElement]:
    """
    Первый (в порядке elements) элемент, порождающий всю Q(n).

    Returns:
        Элемент порядка 4n либо None (группа не циклическая или Q(0))
    """
    size = cardinality(n)
    if size is INFINITE:
        # D∞ не циклическая
        return None
    for x in elements(n):
        if order_of(x) == size:
            return x
    return None


def is_cyclic(n: int) -> bool:
    """
    Циклична ли Q(n). Верно ровно при n = 1 (Q(1) ≅ Z/4Z).
    """
    return cyclic_generator(n) is not None
