"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверки конечности (NaN/Inf)
2. Epsilon-сравнения float и последовательностей
3. Clamp и диапазон отображения
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    DISPLAY_Y_MAX,
    DISPLAY_Y_MIN,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_close,
    clamp,
    clamp_to_display_range,
    is_close,
    is_valid_float,
    validate_finite,
)


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestFiniteChecks:
    """Тесты для is_valid_float / validate_finite"""

    def test_valid_floats(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(1e-300)

    def test_invalid_floats(self) -> None:
        """NaN/Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_validate_finite_passes(self) -> None:
        validate_finite(3.14, "value")

    def test_validate_finite_raises_with_name(self) -> None:
        """Сообщение содержит имя параметра"""
        with pytest.raises(ValueError, match="min_x must be a valid float"):
            validate_finite(math.nan, "min_x")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_epsilon_constants_positive(self) -> None:
        assert EPS_FLOAT_COMPARE_REL > 0
        assert EPS_FLOAT_COMPARE_ABS > 0

    def test_close_values(self) -> None:
        """Значения в пределах толерантности близки"""
        assert is_close(1.0, 1.0 + 1e-12)
        assert is_close(0.0, 1e-12)

    def test_distant_values(self) -> None:
        """Далёкие значения не близки"""
        assert not is_close(1.0, 1.1)

    def test_custom_tolerance(self) -> None:
        """Настраиваемая толерантность"""
        assert is_close(1.0, 1.05, rel_tol=0.0, abs_tol=0.1)
        assert not is_close(1.0, 1.05, rel_tol=0.0, abs_tol=0.01)


class TestAllClose:
    """Тесты для all_close"""

    def test_equal_sequences(self) -> None:
        assert all_close([1.0, 2.0], [1.0, 2.0 + 1e-13])

    def test_length_mismatch(self) -> None:
        """Разные длины — не близки"""
        assert not all_close([1.0], [1.0, 2.0])

    def test_single_mismatch(self) -> None:
        assert not all_close([1.0, 2.0, 3.0], [1.0, 2.5, 3.0])

    def test_empty_sequences(self) -> None:
        assert all_close([], [])


# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_min(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_above_max(self) -> None:
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_one_sided(self) -> None:
        """Только одна граница"""
        assert clamp(-5.0, min_value=0.0) == 0.0
        assert clamp(50.0, max_value=10.0) == 10.0
        assert clamp(50.0) == 50.0


class TestClampToDisplayRange:
    """Тесты для clamp_to_display_range"""

    def test_default_range(self) -> None:
        """Диапазон по умолчанию [-10, 10]"""
        assert DISPLAY_Y_MIN == -10.0
        assert DISPLAY_Y_MAX == 10.0
        assert clamp_to_display_range(12.3) == 10.0
        assert clamp_to_display_range(-99.0) == -10.0
        assert clamp_to_display_range(4.5) == 4.5

    def test_custom_range(self) -> None:
        assert clamp_to_display_range(3.0, -1.0, 1.0) == 1.0

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError, match="valid float"):
            clamp_to_display_range(math.nan)

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_value must be <= max_value"):
            clamp_to_display_range(0.0, 1.0, -1.0)
