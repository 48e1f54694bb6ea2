"""
Тесты для Order & Exponent

Проверяемые инварианты:
1. order(XA(i)) = 4 для n > 0, = 2 для n = 0
2. order(A(1)) = 2n; order(A(i)) = 2n / gcd(2n, i)
3. Формулы совпадают с ограниченным перебором
4. exponent(n) = 2 * lcm(n, 2); exponent(0) = INFINITE (не 0)
5. Q(1) циклическая и порождается XA(0)
"""

import pytest
from hypothesis import given, strategies as st

from quaternion_group import (
    INFINITE,
    Unbounded,
    a,
    brute_force_order,
    cyclic_generator,
    elements,
    exponent,
    exponent_from_orders,
    identity,
    is_cyclic,
    order_of,
    power,
    xa,
)
from quaternion_group.math import InvalidModulus, gcd, lcm
from quaternion_group.order import (
    BRUTE_FORCE_ORDER_FACTOR,
    XA_ORDER_DEGENERATE,
    XA_ORDER_FINITE,
)


# =============================================================================
# ТЕСТЫ: Порядок элемента
# =============================================================================


class TestOrderOf:
    """Порядок по замкнутой формуле."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8])
    def test_xa_has_order_four(self, n):
        for i in range(2 * n):
            assert order_of(xa(n, i)) == XA_ORDER_FINITE == 4

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8])
    def test_a_one_has_order_2n(self, n):
        assert order_of(a(n, 1)) == 2 * n

    def test_identity_has_order_one(self):
        assert order_of(identity(4)) == 1
        assert order_of(identity(0)) == 1

    @given(st.integers(min_value=1, max_value=40), st.data())
    def test_gcd_formula(self, n, data):
        i = data.draw(st.integers(min_value=0, max_value=2 * n - 1))
        # gcd(2n, 0) = 2n, поэтому A(0) получает порядок 1
        expected = (2 * n) // gcd(2 * n, i)
        assert order_of(a(n, i)) == expected

    def test_specific_values(self):
        assert order_of(a(6, 4)) == 3
        assert order_of(a(6, 6)) == 2
        assert order_of(a(6, 9)) == 4

    def test_degenerate_a_is_infinite(self):
        """Q(0): A(i) при i != 0 имеет бесконечный порядок."""
        assert order_of(a(0, 1)) is INFINITE
        assert order_of(a(0, -3)) is Unbounded.INFINITE
        assert order_of(a(0, 1)) != 0

    def test_degenerate_xa_is_involution(self):
        for i in (-2, 0, 5):
            assert order_of(xa(0, i)) == XA_ORDER_DEGENERATE == 2

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_order_annihilates(self, n):
        """x^order(x) = 1 для всех элементов с конечным порядком."""
        samples = [a(n, i) for i in range(-3, 4)] + [xa(n, i) for i in range(-3, 4)]
        for x in samples:
            order = order_of(x)
            if order is INFINITE:
                continue
            assert power(x, order) == identity(n)


class TestBruteForceOrder:
    """Ограниченный перебор для проверки формул."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
    def test_agrees_with_formula(self, n):
        for x in elements(n):
            assert brute_force_order(x) == order_of(x)

    def test_degenerate_requires_limit(self):
        with pytest.raises(ValueError, match="explicit limit"):
            brute_force_order(a(0, 1))

    def test_degenerate_with_limit(self):
        assert brute_force_order(a(0, 1), limit=50) is INFINITE
        assert brute_force_order(xa(0, 7), limit=50) == 2
        assert brute_force_order(a(0, 0), limit=1) == 1

    def test_limit_bounded_by_4n(self):
        n = 3
        with pytest.raises(ValueError, match="iteration bound"):
            brute_force_order(a(n, 1), limit=BRUTE_FORCE_ORDER_FACTOR * n + 1)

    def test_non_positive_limit(self):
        with pytest.raises(ValueError):
            brute_force_order(a(2, 1), limit=0)

    def test_short_limit_reports_infinite(self):
        """Не дошли до единицы за limit шагов → INFINITE."""
        assert brute_force_order(a(5, 1), limit=3) is INFINITE


# =============================================================================
# ТЕСТЫ: Экспонента
# =============================================================================


class TestExponent:
    """exponent(n) = 2 * lcm(n, 2)."""

    def test_known_values(self):
        assert exponent(1) == 4
        assert exponent(3) == 2 * lcm(3, 2) == 12
        assert exponent(4) == 2 * lcm(4, 2) == 8

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 9, 10])
    def test_matches_lcm_of_orders(self, n):
        assert exponent_from_orders(n) == exponent(n)

    def test_degenerate_is_infinite_not_zero(self):
        assert exponent(0) is INFINITE
        assert exponent(0) != 0
        assert exponent_from_orders(0) is INFINITE

    def test_invalid_n(self):
        with pytest.raises(InvalidModulus):
            exponent(-1)

    @given(st.integers(min_value=1, max_value=200))
    def test_exponent_annihilates_generators(self, n):
        e = exponent(n)
        assert power(a(n, 1), e) == identity(n)
        assert power(xa(n, 0), e) == identity(n)


# =============================================================================
# ТЕСТЫ: Цикличность
# =============================================================================


class TestCyclicity:
    """Q(n) циклична ровно при n = 1."""

    def test_q1_is_cyclic(self):
        assert is_cyclic(1)
        generator = cyclic_generator(1)
        assert generator == xa(1, 0)

    def test_q1_every_element_is_power_of_xa0(self):
        generator = xa(1, 0)
        powers = {power(generator, k) for k in range(4)}
        assert set(elements(1)) == powers

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_larger_groups_not_cyclic(self, n):
        assert not is_cyclic(n)
        assert cyclic_generator(n) is None

    def test_degenerate_not_cyclic(self):
        assert not is_cyclic(0)
