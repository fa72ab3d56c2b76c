"""
Differentiation Engine — дискретная производная последовательности

Оценка локального наклона в каждой точке:
- i = 0: forward difference
- i = n-1: backward difference
- 0 < i < n-1: central difference

ФОРМУЛЫ:
    forward:  (y[1] - y[0]) / (x[1] - x[0])
    backward: (y[n-1] - y[n-2]) / (x[n-1] - x[n-2])
    central:  (y[i+1] - y[i-1]) / (x[i+1] - x[i-1])

Без сглаживания и без оценки ошибки. Точность зависит только от шага сэмплирования.
Строгое возрастание x гарантирует Δx > 0; вырожденный вход отклоняется
при создании PointSequence, а не здесь.
"""

from src.core.domain.point_sequence import Point, PointSequence


def secant_slope(left: Point, right: Point) -> float:
    """Наклон секущей между двумя точками (right.x > left.x)"""
    return (right.y - left.y) / (right.x - left.x)


def differentiate(sequence: PointSequence) -> PointSequence:
    """
    Дискретная производная.

    Args:
        sequence: Последовательность длины n

    Returns:
        Последовательность длины n с теми же x и наклонами в качестве y.
        Пустая последовательность при n < 2 (наклон не определён).

    Examples:
        >>> seq = PointSequence.from_pairs([(0, 0), (1, 1), (2, 4)])
        >>> differentiate(seq).ys
        [1.0, 2.0, 3.0]
    """
    points = sequence.points
    n = len(points)

    if n < 2:
        return PointSequence()

    slopes = []
    for i in range(n):
        if i == 0:
            slope = secant_slope(points[0], points[1])
        elif i == n - 1:
            slope = secant_slope(points[n - 2], points[n - 1])
        else:
            slope = secant_slope(points[i - 1], points[i + 1])
        slopes.append(slope)

    return sequence.with_ys(slopes)
