"""
Тесты для модуля Integral Ops

Проверяет:
1. Границы signed диапазона
2. Wrap-around и saturation
3. apply_overflow_policy для всех политик
4. Валидацию типов и разрядности
"""

import logging

import pytest

from src.core.math.integral_ops import (
    DEFAULT_INTEGER_BITS,
    INT32_MAX,
    INT32_MIN,
    IntegerOverflowError,
    OverflowPolicy,
    apply_overflow_policy,
    fits_in_width,
    int_bounds,
    is_integral,
    saturate_to_width,
    to_decimal_str,
    validate_bits,
    validate_integral,
    wrap_to_width,
)


# =============================================================================
# ТЕСТЫ ГРАНИЦ
# =============================================================================


class TestIntBounds:
    """Тесты для int_bounds / fits_in_width"""

    def test_int32_constants(self) -> None:
        assert DEFAULT_INTEGER_BITS == 32
        assert int_bounds() == (INT32_MIN, INT32_MAX)
        assert INT32_MAX == 2147483647
        assert INT32_MIN == -2147483648

    @pytest.mark.parametrize(
        "bits, expected",
        [(1, (-1, 0)), (8, (-128, 127)), (16, (-32768, 32767)), (64, (-(2**63), 2**63 - 1))],
    )
    def test_bounds_for_width(self, bits, expected) -> None:
        assert int_bounds(bits) == expected

    def test_fits_in_width_edges(self) -> None:
        assert fits_in_width(INT32_MAX)
        assert fits_in_width(INT32_MIN)
        assert not fits_in_width(INT32_MAX + 1)
        assert not fits_in_width(INT32_MIN - 1)

    @pytest.mark.parametrize("bits", [0, -8, 3.5, "32"])
    def test_invalid_bits_rejected(self, bits) -> None:
        with pytest.raises(ValueError, match="bits"):
            int_bounds(bits)


# =============================================================================
# ТЕСТЫ WRAP / SATURATE
# =============================================================================


class TestWrapToWidth:
    """Тесты для wrap_to_width"""

    def test_in_range_unchanged(self) -> None:
        for value in (0, 1, -1, INT32_MAX, INT32_MIN):
            assert wrap_to_width(value) == value

    def test_max_plus_one_wraps_to_min(self) -> None:
        assert wrap_to_width(INT32_MAX + 1) == INT32_MIN

    def test_min_minus_one_wraps_to_max(self) -> None:
        assert wrap_to_width(INT32_MIN - 1) == INT32_MAX

    def test_square_of_46341(self) -> None:
        assert wrap_to_width(46341 * 46341) == -2147479015

    def test_full_modulus_wraps_to_zero(self) -> None:
        assert wrap_to_width(2**32) == 0
        assert wrap_to_width(2**8, bits=8) == 0


class TestSaturateToWidth:
    """Тесты для saturate_to_width"""

    def test_in_range_unchanged(self) -> None:
        assert saturate_to_width(12345) == 12345

    def test_clamps_high(self) -> None:
        assert saturate_to_width(10**30) == INT32_MAX

    def test_clamps_low(self) -> None:
        assert saturate_to_width(-(10**30)) == INT32_MIN

    def test_narrow_width(self) -> None:
        assert saturate_to_width(200, bits=8) == 127


# =============================================================================
# ТЕСТЫ ПОЛИТИК
# =============================================================================


class TestApplyOverflowPolicy:
    """Тесты для apply_overflow_policy"""

    def test_widen_never_changes_value(self) -> None:
        big = 10**40
        assert apply_overflow_policy(big, OverflowPolicy.WIDEN) == big

    def test_wrap(self) -> None:
        assert apply_overflow_policy(INT32_MAX + 1, OverflowPolicy.WRAP) == INT32_MIN

    def test_saturate(self) -> None:
        assert apply_overflow_policy(INT32_MAX + 1, OverflowPolicy.SATURATE) == INT32_MAX

    def test_checked_raises(self) -> None:
        with pytest.raises(IntegerOverflowError, match="32-bit"):
            apply_overflow_policy(INT32_MAX + 1, OverflowPolicy.CHECKED)

    def test_checked_error_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            apply_overflow_policy(INT32_MIN - 1, OverflowPolicy.CHECKED)

    def test_in_range_unchanged_for_all_policies(self) -> None:
        for policy in OverflowPolicy:
            assert apply_overflow_policy(56, policy) == 56

    def test_policy_accepts_string_value(self) -> None:
        assert apply_overflow_policy(INT32_MAX + 1, "wrap") == INT32_MIN

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            apply_overflow_policy(1, "truncate")

    def test_adjustment_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.math.integral_ops"):
            apply_overflow_policy(INT32_MAX + 1, OverflowPolicy.SATURATE)
        assert "overflow adjusted" in caplog.text


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для is_integral / validate_integral / validate_bits"""

    @pytest.mark.parametrize("value", [0, -3, 10**50])
    def test_integers_accepted(self, value) -> None:
        assert is_integral(value)
        validate_integral(value)

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_non_integers_rejected(self, value) -> None:
        assert not is_integral(value)
        with pytest.raises(TypeError, match="count"):
            validate_integral(value, "count")

    def test_validate_bits(self) -> None:
        validate_bits(32)
        with pytest.raises(ValueError):
            validate_bits(0)


# =============================================================================
# ТЕСТЫ DECIMAL КОНВЕРСИИ
# =============================================================================


class TestToDecimalStr:
    """Тесты для to_decimal_str"""

    @pytest.mark.parametrize("value", [0, 7, -7, INT32_MAX, INT32_MIN, 10**100 + 3])
    def test_matches_str_below_limit(self, value) -> None:
        assert to_decimal_str(value) == str(value)

    def test_all_nines(self) -> None:
        assert to_decimal_str(10**5000 - 1) == "9" * 5000

    def test_inner_zeros_preserved(self) -> None:
        """Нули на стыке половин не теряются"""
        assert to_decimal_str(123 * 10**4500 + 45) == "123" + "0" * 4498 + "45"

    def test_very_long_value(self) -> None:
        assert to_decimal_str(-(10**20000)) == "-1" + "0" * 20000

    def test_checked_error_message_for_huge_value(self) -> None:
        with pytest.raises(IntegerOverflowError) as exc_info:
            apply_overflow_policy(10**5000, OverflowPolicy.CHECKED)
        assert str(exc_info.value).startswith("Integer overflow: 1" + "0" * 5000 + " outside")
