"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает общие численные примитивы для движков и координатора:
- Epsilon-параметры для сравнения float
- Проверка конечности значений (NaN/Inf не должны попадать в последовательности)
- Epsilon-сравнения float и последовательностей
- Clamp значений в диапазон отображения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в PointSequence (ValueError на входе)
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Трапеции и центральные разности накапливают ошибку порядка 1e-15 на шаг
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# ДИАПАЗОН ОТОБРАЖЕНИЯ
# =============================================================================

# Границы перетаскивания y на интерактивном графике
DISPLAY_Y_MIN: Final[float] = -10.0
DISPLAY_Y_MAX: Final[float] = 10.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечно
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-12)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def all_close(
    a: Sequence[float],
    b: Sequence[float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух последовательностей float.

    Returns:
        False если длины различаются или хотя бы одна пара не близка
    """
    if len(a) != len(b):
        return False
    return all(is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol) for x, y in zip(a, b))


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_to_display_range(
    value: float,
    min_value: float = DISPLAY_Y_MIN,
    max_value: float = DISPLAY_Y_MAX,
) -> float:
    """
    Clamp перетаскиваемого значения в диапазон отображения.

    Выполняется вызывающей стороной (Coordinate Mapper) до передачи
    правки координатору. Координатор повторно не ограничивает.

    Raises:
        ValueError: Если value NaN/Inf или min_value > max_value
    """
    validate_finite(value, "value")
    if min_value > max_value:
        raise ValueError(f"min_value must be <= max_value, got [{min_value}, {max_value}]")
    return clamp(value, min_value, max_value)
