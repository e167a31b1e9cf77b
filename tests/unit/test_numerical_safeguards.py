"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-сравнения float
2. Округление half away from zero
3. Clamp и clamp_channel
4. Валидацию параметров
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPSILON,
    clamp,
    clamp_channel,
    is_equal,
    is_valid_float,
    round_half_away,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsEqual:
    """Тесты для is_equal"""

    def test_epsilon_value(self) -> None:
        assert EPSILON == 1e-5

    def test_identical_values(self) -> None:
        assert is_equal(1.0, 1.0)
        assert is_equal(-3.5, -3.5)

    def test_within_tolerance(self) -> None:
        assert is_equal(1.0, 1.0 + 9e-6)
        assert is_equal(1.0, 1.0 - 9e-6)

    def test_strict_boundary(self) -> None:
        """abs(a - b) == eps не считается равенством"""
        assert not is_equal(0.0, EPSILON)
        assert not is_equal(0.0, -EPSILON)

    def test_outside_tolerance(self) -> None:
        assert not is_equal(1.0, 1.1)

    def test_custom_eps(self) -> None:
        assert is_equal(1.0, 1.05, eps=0.1)
        assert not is_equal(1.0, 1.0 + 1e-7, eps=1e-8)

    def test_symmetric(self) -> None:
        assert is_equal(2.0, 2.000001) == is_equal(2.000001, 2.0)

    def test_nan_never_equal(self) -> None:
        assert not is_equal(float("nan"), float("nan"))


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_non_finite(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ И CLAMP
# =============================================================================


class TestRoundHalfAway:
    """Тесты для round_half_away"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),
            (0.4, 0),
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (127.5, 128),
            (-0.5, -1),
            (-2.5, -3),
            (-0.4, 0),
        ],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_away(value) == expected

    def test_returns_int(self) -> None:
        assert isinstance(round_half_away(1.2), int)

    def test_float_drift(self) -> None:
        """0.8 * 255 == 204.00000000000003 округляется до 204"""
        assert round_half_away(0.8 * 255) == 204


class TestClamp:
    """Тесты для clamp"""

    def test_inside_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_min(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_above_max(self) -> None:
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_open_bounds(self) -> None:
        assert clamp(-100.0, max_value=10.0) == -100.0
        assert clamp(100.0, min_value=0.0) == 100.0
        assert clamp(7.0) == 7.0


class TestClampChannel:
    """Тесты для clamp_channel"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),
            (1.0, 255),
            (0.5, 128),
            (0.8, 204),
            (0.6, 153),
            (1.5, 255),
            (-1.5, 0),
            (-0.001, 0),
        ],
    )
    def test_255(self, value: float, expected: int) -> None:
        assert clamp_channel(value, 255) == expected

    def test_other_max_color(self) -> None:
        assert clamp_channel(0.5, 15) == 8
        assert clamp_channel(2.0, 15) == 15

    def test_result_in_range(self) -> None:
        for value in (-10.0, -0.5, 0.0, 0.25, 0.999, 1.0, 3.0):
            result = clamp_channel(value, 255)
            assert 0 <= result <= 255
            assert isinstance(result, int)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e308, 255),
            (-1e308, 0),
            (math.inf, 255),
            (-math.inf, 0),
            (math.nan, 0),
        ],
    )
    def test_overflow_and_nan_clamped(self, value: float, expected: int) -> None:
        """Переполнение value * max_color и NaN дают границу диапазона, а не исключение"""
        result = clamp_channel(value, 255)

        assert result == expected
        assert isinstance(result, int)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidatePositive:
    """Тесты для validate_positive"""

    def test_positive_ok(self) -> None:
        validate_positive(1, "max_color")
        validate_positive(0.001, "line_width")

    def test_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="max_color must be positive"):
            validate_positive(0, "max_color")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(-1, "x")

    def test_non_finite_raises(self) -> None:
        with pytest.raises(ValueError, match="valid number"):
            validate_positive(math.inf, "x")

        with pytest.raises(ValueError, match="valid number"):
            validate_positive(math.nan, "x")
