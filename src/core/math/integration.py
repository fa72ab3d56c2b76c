"""
Integration Engine — кумулятивная первообразная последовательности

Метод трапеций, якорь задаётся константой интегрирования C:
    F[0] = C
    F[i] = F[i-1] + ((y[i] + y[i-1]) / 2) * (x[i] - x[i-1])

Движок не хранит предыдущее состояние первообразной: C — единственный
источник вертикального положения результата.
"""

from src.core.domain.point_sequence import Point, PointSequence
from src.core.math.numerical_safeguards import validate_finite


def trapezoid_area(left: Point, right: Point) -> float:
    """Площадь трапеции под отрезком [left, right]"""
    return (right.y + left.y) / 2 * (right.x - left.x)


def integrate(sequence: PointSequence, constant: float = 0.0) -> PointSequence:
    """
    Кумулятивная первообразная по правилу трапеций.

    Args:
        sequence: Последовательность длины n
        constant: Константа интегрирования C (значение в первой точке)

    Returns:
        Последовательность длины n с теми же x; первый y равен C ровно.
        Пустая последовательность при n < 1.

    Raises:
        ValueError: Если constant NaN/Inf

    Examples:
        >>> integrate(PointSequence.from_pairs([(0, 1), (1, 1)]), 0.0).ys
        [0.0, 1.0]
    """
    validate_finite(constant, "constant")

    points = sequence.points
    if not points:
        return PointSequence()

    total = float(constant)
    accumulated = [total]
    for left, right in zip(points, points[1:]):
        total += trapezoid_area(left, right)
        accumulated.append(total)

    return sequence.with_ys(accumulated)
