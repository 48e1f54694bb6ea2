"""
Тесты для ZMod — Modular Integer Substrate

Проверяемые инварианты:
1. Значение всегда приведено в [0, m) при m > 0
2. При m = 0 арифметика совпадает с арифметикой Z
3. Immutability (frozen=True)
4. Разные модули не смешиваются
5. Отрицательный / нецелый модуль → InvalidModulus
"""

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from quaternion_group.domain import QuaternionElement, a
from quaternion_group.math import (
    UNBOUNDED_MODULUS,
    InvalidModulus,
    Modulus,
    ModulusKind,
    ZMod,
    validate_modulus,
)
from quaternion_group.order import order_of


# =============================================================================
# ТЕСТЫ: Modulus
# =============================================================================


class TestModulus:
    """Тесты Modulus: Finite(m) vs Unbounded."""

    def test_finite_kind(self):
        assert Modulus.of(6).kind is ModulusKind.FINITE
        assert Modulus.of(6).is_finite

    def test_unbounded_kind(self):
        assert Modulus.unbounded().kind is ModulusKind.UNBOUNDED
        assert Modulus.of(0) == Modulus.unbounded()
        assert Modulus.unbounded().size == UNBOUNDED_MODULUS

    def test_finite_reduce(self):
        m = Modulus.of(6)
        assert m.reduce(7) == 1
        assert m.reduce(-1) == 5
        assert m.reduce(0) == 0

    def test_unbounded_reduce_keeps_integer(self):
        m = Modulus.unbounded()
        assert m.reduce(-17) == -17
        assert m.reduce(10**30) == 10**30

    def test_negative_modulus_rejected(self):
        with pytest.raises(InvalidModulus):
            Modulus.of(-1)


class TestValidateModulus:
    """Тесты validate_modulus."""

    def test_valid(self):
        assert validate_modulus(0) == 0
        assert validate_modulus(12) == 12

    def test_negative(self):
        with pytest.raises(InvalidModulus, match="non-negative"):
            validate_modulus(-3)

    @pytest.mark.parametrize("bad", [1.5, "4", None, True])
    def test_non_integer(self, bad):
        with pytest.raises(InvalidModulus):
            validate_modulus(bad)

    def test_is_value_error(self):
        """InvalidModulus ловится как ValueError."""
        with pytest.raises(ValueError):
            validate_modulus(-1, name="n")


# =============================================================================
# ТЕСТЫ: ZMod
# =============================================================================


class TestZModConstruction:
    """Создание и приведение вычетов."""

    def test_reduced_on_construction(self):
        assert ZMod.of(7, 4).value == 3
        assert ZMod.of(-1, 4).value == 3
        assert ZMod(value=9, modulus=4).value == 1

    def test_reduced_after_lax_coercion(self):
        """Строки и целые float приводятся так же, как int."""
        assert ZMod(value="7", modulus=4).value == 3
        assert ZMod(value=7.0, modulus=4).value == 3
        assert ZMod(value="-1", modulus="4") == ZMod.of(3, 4)
        assert ZMod(value="-5", modulus=0).value == -5

    def test_nested_element_index_reduced(self):
        element = QuaternionElement.model_validate(
            {"n": 2, "kind": "a", "index": {"value": "5", "modulus": "4"}}
        )
        assert element == a(2, 1)
        assert order_of(element) == 4

        element = QuaternionElement(n=2, kind="a", index={"value": 5.0, "modulus": 4})
        assert element.index.value == 1
        assert order_of(element) == 4

    def test_structural_equality(self):
        assert ZMod.of(7, 4) == ZMod.of(3, 4)
        assert ZMod.of(3, 4) != ZMod.of(3, 5)

    def test_hashable(self):
        assert len({ZMod.of(1, 4), ZMod.of(5, 4), ZMod.of(2, 4)}) == 2

    def test_immutable(self):
        x = ZMod.of(1, 4)
        with pytest.raises(ValidationError):
            x.value = 2  # type: ignore

    def test_invalid_modulus(self):
        with pytest.raises(InvalidModulus):
            ZMod.of(1, -4)

    def test_direct_negative_modulus_is_validation_error(self):
        with pytest.raises(ValidationError):
            ZMod(value=1, modulus=-4)

    def test_non_integer_value(self):
        with pytest.raises(ValueError):
            ZMod.of(1.5, 4)  # type: ignore


class TestZModArithmetic:
    """Сложение, вычитание, отрицание, умножение."""

    def test_add(self):
        assert ZMod.of(3, 4) + ZMod.of(2, 4) == ZMod.of(1, 4)
        assert ZMod.of(3, 4) + 2 == ZMod.of(1, 4)
        assert 2 + ZMod.of(3, 4) == ZMod.of(1, 4)

    def test_sub(self):
        assert ZMod.of(1, 4) - ZMod.of(2, 4) == ZMod.of(3, 4)
        assert 1 - ZMod.of(2, 4) == ZMod.of(3, 4)

    def test_neg(self):
        assert -ZMod.of(1, 4) == ZMod.of(3, 4)
        assert -ZMod.of(0, 4) == ZMod.of(0, 4)

    def test_mul(self):
        assert ZMod.of(3, 4) * 3 == ZMod.of(1, 4)
        assert 3 * ZMod.of(3, 4) == ZMod.of(1, 4)
        assert ZMod.of(3, 8) * ZMod.of(3, 8) == ZMod.of(1, 8)

    def test_unbounded_arithmetic(self):
        """Z/0Z: арифметика точных целых."""
        x = ZMod.of(2, 0)
        y = ZMod.of(3, 0)
        assert (x - y).value == -1
        assert (x + y).value == 5
        assert (-y).value == -3

    def test_unequal_moduli_rejected(self):
        with pytest.raises(ValueError, match="unequal moduli"):
            ZMod.of(1, 4) + ZMod.of(1, 5)

    def test_bad_operand_rejected(self):
        with pytest.raises(ValueError):
            ZMod.of(1, 4) + 1.0  # type: ignore

    @given(st.integers(min_value=1, max_value=50), st.integers(), st.integers())
    def test_add_matches_integer_reduction(self, m, x, y):
        assert (ZMod.of(x, m) + ZMod.of(y, m)).value == (x + y) % m

    @given(st.integers(min_value=1, max_value=50), st.integers())
    def test_value_in_range(self, m, x):
        assert 0 <= ZMod.of(x, m).value < m


class TestZModVal:
    """Канонический представитель .val."""

    def test_finite_val(self):
        assert ZMod.of(-1, 6).val == 5
        assert ZMod.of(6, 6).val == 0

    def test_unbounded_val_is_abs(self):
        assert ZMod.of(-7, 0).val == 7
        assert ZMod.of(7, 0).val == 7

    def test_int_and_str(self):
        assert int(ZMod.of(9, 4)) == 1
        assert str(ZMod.of(9, 4)) == "1"
