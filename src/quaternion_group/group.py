"""
Group Operations — Групповая структура Q(n)

Таблица умножения (индексы в Z/2nZ):
    A(i)  * A(j)  = A(i + j)
    A(i)  * XA(j) = XA(j - i)
    XA(i) * A(j)  = XA(i + j)
    XA(i) * XA(j) = A(n + j - i)

Нейтральный элемент: A(0)
Обратные: A(i)^-1 = A(-i), XA(i)^-1 = XA(n + i)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ассоциативность, нейтральный и обратный элементы выполняются для любого n,
   включая n = 0 (арифметика над Z вместо Z/2nZ)
2. Операнды из групп с разным n → GroupMismatch
3. Перечисление Q(0) → UnboundedEnumeration (никогда не бесконечный цикл)
"""

from typing import Final, Iterator

from quaternion_group.domain.bounds import INFINITE, Count
from quaternion_group.domain.element import ElementKind, QuaternionElement, a, xa
from quaternion_group.math.zmod import validate_modulus

# Порядок группы: |Q(n)| = CARDINALITY_FACTOR * n
CARDINALITY_FACTOR: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnboundedEnumeration(Exception):
    """
    Запрос перечисления элементов бесконечной группы Q(0).

    Носитель Q(0) индексирован всеми целыми числами, конечного перечисления
    не существует.
    """

    pass


class GroupMismatch(ValueError):
    """Операнды принадлежат группам Q(n) с разными n."""

    pass


def _check_same_group(x: QuaternionElement, y: QuaternionElement) -> None:
    if x.n != y.n:
        raise GroupMismatch(f"Cannot combine elements of Q({x.n}) and Q({y.n})")


# =============================================================================
# ГРУППОВЫЕ ОПЕРАЦИИ
# =============================================================================


def identity(n: int) -> QuaternionElement:
    """
    Нейтральный элемент Q(n): A(0).

    Raises:
        InvalidModulus: Если n отрицательный или не целый
    """
    return a(n, 0)


def multiply(x: QuaternionElement, y: QuaternionElement) -> QuaternionElement:
    """
    Произведение x * y в Q(n).

    Args:
        x: Левый множитель
        y: Правый множитель

    Returns:
        Новый элемент Q(n)

    Raises:
        GroupMismatch: Если x.n != y.n

    Examples:
        >>> str(multiply(xa(2, 1), xa(2, 1)))
        'a(2)'
        >>> str(multiply(a(0, 2), xa(0, 3)))
        'xa(1)'
    """
    _check_same_group(x, y)
    n = x.n
    i, j = x.index, y.index

    if x.is_a and y.is_a:
        return QuaternionElement(n=n, kind=ElementKind.A, index=i + j)
    if x.is_a:
        return QuaternionElement(n=n, kind=ElementKind.XA, index=j - i)
    if y.is_a:
        return QuaternionElement(n=n, kind=ElementKind.XA, index=i + j)
    return QuaternionElement(n=n, kind=ElementKind.A, index=j - i + n)


def inverse(x: QuaternionElement) -> QuaternionElement:
    """
    Обратный элемент.

    A(i)^-1 = A(-i), XA(i)^-1 = XA(n + i)
    """
    if x.is_a:
        return QuaternionElement(n=x.n, kind=ElementKind.A, index=-x.index)
    return QuaternionElement(n=x.n, kind=ElementKind.XA, index=x.index + x.n)


def power(x: QuaternionElement, k: int) -> QuaternionElement:
    """
    Возведение в целую степень (в замкнутой форме, без повторного умножения).

    Формулы:
        A(i)^k        = A(k * i)
        XA(i)^(2m)    = A(m * n)
        XA(i)^(2m+1)  = XA(i + m * n)

    Так как XA(i)^2 = A(n) лежит в центре, формулы верны и для k < 0
    (m = floor(k / 2)).

    Examples:
        >>> str(power(xa(3, 1), 2))
        'a(3)'
        >>> power(xa(3, 1), 4) == identity(3)
        True
        >>> str(power(a(4, 3), -1))
        'a(5)'
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"exponent must be an integer, got {k!r}")

    if x.is_a:
        return QuaternionElement(n=x.n, kind=ElementKind.A, index=x.index * k)

    m, odd = divmod(k, 2)
    if odd:
        return QuaternionElement(n=x.n, kind=ElementKind.XA, index=x.index + m * x.n)
    return a(x.n, m * x.n)


def a_one_pow(n: int, k: int) -> QuaternionElement:
    """A(1)^k = A(k)."""
    return power(a(n, 1), k)


# =============================================================================
# КАРДИНАЛЬНОСТЬ И ПЕРЕЧИСЛЕНИЕ
# =============================================================================


def cardinality(n: int) -> Count:
    """
    Порядок группы Q(n).

    Returns:
        4n для n > 0, INFINITE для n = 0

    Raises:
        InvalidModulus: Если n отрицательный или не целый
    """
    n = validate_modulus(n, name="n")
    if n == 0:
        return INFINITE
    return CARDINALITY_FACTOR * n


def _iter_elements(n: int) -> Iterator[QuaternionElement]:
    for i in range(2 * n):
        yield a(n, i)
    for i in range(2 * n):
        yield xa(n, i)


def elements(n: int) -> Iterator[QuaternionElement]:
    """
    Перечисление всех 4n элементов Q(n).

    Порядок: A(0), ..., A(2n-1), XA(0), ..., XA(2n-1).

    Raises:
        UnboundedEnumeration: Если n = 0 (проверка до первого элемента)
        InvalidModulus: Если n отрицательный или не целый
    """
    n = validate_modulus(n, name="n")
    if n == 0:
        raise UnboundedEnumeration("Q(0) is infinite: its elements cannot be enumerated")
    return _iter_elements(n)


def element_index(x: QuaternionElement) -> int:
    """
    Позиция элемента в порядке перечисления elements(n).

    A(i) → i, XA(i) → 2n + i

    Raises:
        UnboundedEnumeration: Если x из Q(0)
    """
    if x.n == 0:
        raise UnboundedEnumeration("Elements of Q(0) have no enumeration index")
    if x.is_a:
        return x.index.val
    return 2 * x.n + x.index.val


def cayley_table(n: int) -> list[list[int]]:
    """
    Таблица Кэли Q(n) в индексах element_index.

    table[p][q] = element_index(g_p * g_q), где g_p — p-й элемент elements(n).

    Raises:
        UnboundedEnumeration: Если n = 0
    """
    group = list(elements(n))
    return [[element_index(multiply(x, y)) for y in group] for x in group]
