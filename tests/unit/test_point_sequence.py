"""
Тесты для модели PointSequence

Проверяет:
1. Инвариант строгого возрастания x
2. Запрет NaN/Inf
3. Immutability (frozen=True)
4. Трансформации (with_y_at, with_ys, every_nth)
5. JSON сериализацию/десериализацию
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import Edit, GraphRole, Point, PointSequence


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def parabola():
    """x² на [0, 2]"""
    return PointSequence.from_pairs([(0, 0), (1, 1), (2, 4)])


# =============================================================================
# ТЕСТЫ POINT
# =============================================================================


class TestPoint:
    """Тесты для Point"""

    def test_create_point(self) -> None:
        """Создание точки"""
        p = Point(x=1.5, y=-2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_is_immutable(self) -> None:
        """Точка неизменяема"""
        p = Point(x=0.0, y=0.0)
        with pytest.raises(ValidationError):
            p.y = 1.0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad: float) -> None:
        """NaN/Inf отклоняются"""
        with pytest.raises(ValidationError):
            Point(x=0.0, y=bad)
        with pytest.raises(ValidationError):
            Point(x=bad, y=0.0)


# =============================================================================
# ТЕСТЫ ИНВАРИАНТА
# =============================================================================


class TestStrictlyIncreasingX:
    """Тесты инварианта строго возрастающего x"""

    def test_empty_sequence_valid(self) -> None:
        """Пустая последовательность валидна"""
        seq = PointSequence()
        assert len(seq) == 0
        assert seq.xs == []

    def test_single_point_valid(self) -> None:
        """Одна точка валидна"""
        assert len(PointSequence.from_pairs([(3.0, 1.0)])) == 1

    def test_increasing_valid(self, parabola: PointSequence) -> None:
        """Возрастающий x валиден"""
        assert parabola.xs == [0.0, 1.0, 2.0]
        assert parabola.ys == [0.0, 1.0, 4.0]

    def test_duplicate_x_rejected(self) -> None:
        """Дубликат x отклоняется"""
        with pytest.raises(ValidationError, match="strictly increasing"):
            PointSequence.from_pairs([(0, 0), (1, 1), (1, 2)])

    def test_decreasing_x_rejected(self) -> None:
        """Убывающий x отклоняется"""
        with pytest.raises(ValidationError, match="strictly increasing"):
            PointSequence.from_pairs([(0, 0), (2, 1), (1, 2)])

    def test_invariant_violation_is_value_error(self) -> None:
        """Нарушение инварианта — подкласс ValueError"""
        with pytest.raises(ValueError):
            PointSequence.from_pairs([(1, 0), (0, 0)])


# =============================================================================
# ТЕСТЫ КОНСТРУКТОРОВ И ДОСТУПА
# =============================================================================


class TestConstructionAndAccess:
    """Тесты конструкторов и доступа"""

    def test_from_xy(self) -> None:
        """from_xy строит точки попарно"""
        seq = PointSequence.from_xy([0, 1], [5, 6])
        assert seq.points == (Point(x=0, y=5), Point(x=1, y=6))

    def test_from_xy_length_mismatch(self) -> None:
        """Разные длины xs и ys отклоняются"""
        with pytest.raises(ValueError, match="equal length"):
            PointSequence.from_xy([0, 1, 2], [0, 1])

    def test_first_y(self, parabola: PointSequence) -> None:
        """first_y — y первой точки"""
        assert parabola.first_y == 0.0

    def test_first_y_empty_raises(self) -> None:
        """first_y пустой последовательности — IndexError"""
        with pytest.raises(IndexError):
            PointSequence().first_y

    def test_sequence_is_immutable(self, parabola: PointSequence) -> None:
        """Последовательность неизменяема"""
        with pytest.raises(ValidationError):
            parabola.points = ()


# =============================================================================
# ТЕСТЫ ТРАНСФОРМАЦИЙ
# =============================================================================


class TestTransformations:
    """Тесты трансформаций (всегда новый экземпляр)"""

    def test_with_y_at_replaces_single_point(self, parabola: PointSequence) -> None:
        """with_y_at меняет только одну точку"""
        edited = parabola.with_y_at(1, 7.5)

        assert edited.ys == [0.0, 7.5, 4.0]
        assert edited.xs == parabola.xs
        # Исходная последовательность не изменилась
        assert parabola.ys == [0.0, 1.0, 4.0]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_with_y_at_out_of_range(self, parabola: PointSequence, index: int) -> None:
        """Индекс вне диапазона — IndexError без clamp"""
        with pytest.raises(IndexError):
            parabola.with_y_at(index, 0.0)

    def test_with_ys_keeps_x(self, parabola: PointSequence) -> None:
        """with_ys сохраняет x"""
        assert parabola.with_ys([9, 8, 7]).xs == parabola.xs

    def test_every_nth(self) -> None:
        """every_nth(2) оставляет точки с чётными индексами"""
        seq = PointSequence.from_xy(range(5), range(5))
        assert seq.every_nth(2).xs == [0.0, 2.0, 4.0]

    def test_every_nth_invalid_step(self, parabola: PointSequence) -> None:
        """step < 1 отклоняется"""
        with pytest.raises(ValueError, match="step must be"):
            parabola.every_nth(0)


# =============================================================================
# ТЕСТЫ СЕРИАЛИЗАЦИИ
# =============================================================================


class TestSerialization:
    """Тесты JSON сериализации"""

    def test_to_payload(self, parabola: PointSequence) -> None:
        """to_payload даёт JSON-совместимый dict"""
        payload = parabola.to_payload()
        assert payload == {
            "points": [
                {"x": 0.0, "y": 0.0},
                {"x": 1.0, "y": 1.0},
                {"x": 2.0, "y": 4.0},
            ]
        }

    def test_from_payload_restores(self, parabola: PointSequence) -> None:
        """from_payload восстанавливает последовательность"""
        assert PointSequence.from_payload(parabola.to_payload()) == parabola

    def test_from_payload_enforces_invariant(self) -> None:
        """from_payload проверяет инвариант"""
        with pytest.raises(ValidationError):
            PointSequence.from_payload({"points": [{"x": 1, "y": 0}, {"x": 1, "y": 0}]})


# =============================================================================
# ТЕСТЫ EDIT И GRAPHROLE
# =============================================================================


class TestEditAndRole:
    """Тесты Edit и GraphRole"""

    def test_edit_valid(self) -> None:
        edit = Edit(index=2, new_value=-3.5)
        assert edit.index == 2
        assert edit.new_value == -3.5

    def test_edit_negative_index_rejected(self) -> None:
        """Отрицательный индекс отклоняется"""
        with pytest.raises(ValidationError):
            Edit(index=-1, new_value=0.0)

    def test_edit_nan_rejected(self) -> None:
        """NaN значение отклоняется"""
        with pytest.raises(ValidationError):
            Edit(index=0, new_value=math.nan)

    def test_role_from_string(self) -> None:
        """GraphRole из строки"""
        assert GraphRole("DERIVATIVE") is GraphRole.DERIVATIVE

    def test_role_titles(self) -> None:
        """Локализованные заголовки"""
        assert GraphRole.PRIMARY.title == "Funktion f(x)"
        assert GraphRole.DERIVATIVE.title == "Ableitung f'(x)"
        assert GraphRole.ANTIDERIVATIVE.title == "Stammfunktion F(x)"
