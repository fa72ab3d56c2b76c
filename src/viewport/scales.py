"""Viewport Scales — перевод координат указателя в данные и обратно.

Линейные шкалы интерактивного графика (без отрисовки):
- x-домен: [min x, max x] последовательности, [-π, π] для пустой
- y-домен: симметричный ±max(min_y_extent, max|y|) * y_padding
- y-диапазон в пикселях инвертирован (0 сверху)

При перетаскивании значение y ограничивается диапазоном отображения
[-10, 10] до передачи правки координатору.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from src.core.domain.point_sequence import Edit, PointSequence
from src.core.math.numerical_safeguards import (
    DISPLAY_Y_MAX,
    DISPLAY_Y_MIN,
    clamp,
    clamp_to_display_range,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Margin:
    """Отступы области построения (пиксели)."""

    top: float = 20.0
    right: float = 30.0
    bottom: float = 30.0
    left: float = 50.0


@dataclass(frozen=True)
class ViewportConfig:
    """Конфигурация шкал и диапазона перетаскивания."""

    margin: Margin = field(default_factory=Margin)
    default_x_domain: tuple[float, float] = (-math.pi, math.pi)
    min_y_extent: float = 5.0
    y_padding: float = 1.2
    drag_min: float = DISPLAY_Y_MIN
    drag_max: float = DISPLAY_Y_MAX


# =============================================================================
# LINEAR SCALE
# =============================================================================


@dataclass(frozen=True)
class LinearScale:
    """Линейное отображение domain → range и обратное."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            # Вырожденный домен: середина диапазона
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)


# =============================================================================
# VIEWPORT
# =============================================================================


class GraphViewport:
    """Шкалы одного графика, построенные по текущей последовательности.

    Пиксельные координаты указателя задаются относительно левого верхнего
    угла графика (включая отступы).
    """

    def __init__(
        self,
        sequence: PointSequence,
        x_scale: LinearScale,
        y_scale: LinearScale,
        config: ViewportConfig,
    ):
        self.sequence = sequence
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.config = config

    @classmethod
    def for_sequence(
        cls,
        sequence: PointSequence,
        width: float,
        height: float,
        config: Optional[ViewportConfig] = None,
    ) -> "GraphViewport":
        """
        Построение шкал для последовательности и размеров графика.

        Args:
            sequence: отображаемая последовательность
            width: ширина графика (пиксели)
            height: высота графика (пиксели)
            config: конфигурация шкал
        """
        config = config or ViewportConfig()
        margin = config.margin

        inner_width = max(width - margin.left - margin.right, 0.0)
        inner_height = max(height - margin.top - margin.bottom, 0.0)

        if len(sequence):
            x_domain = (sequence.points[0].x, sequence.points[-1].x)
            y_max = max(config.min_y_extent, max(abs(y) for y in sequence.ys))
        else:
            x_domain = config.default_x_domain
            y_max = config.min_y_extent

        y_limit = y_max * config.y_padding

        return cls(
            sequence=sequence,
            x_scale=LinearScale(domain=x_domain, range=(0.0, inner_width)),
            y_scale=LinearScale(domain=(-y_limit, y_limit), range=(inner_height, 0.0)),
            config=config,
        )

    def to_pixels(self) -> list[tuple[float, float]]:
        """Пиксельные координаты точек (относительно области построения)"""
        return [(self.x_scale(p.x), self.y_scale(p.y)) for p in self.sequence.points]

    def value_at(self, pointer_y: float) -> float:
        """y-значение данных для координаты указателя, ограниченное диапазоном перетаскивания"""
        raw = self.y_scale.invert(pointer_y - self.config.margin.top)
        return clamp_to_display_range(raw, self.config.drag_min, self.config.drag_max)

    def nearest_index(self, pointer_x: float) -> int:
        """
        Индекс ближайшей по x точки для координаты указателя.

        Raises:
            ValueError: Если последовательность пуста
        """
        if not len(self.sequence):
            raise ValueError("nearest_index on an empty sequence")
        x = self.x_scale.invert(pointer_x - self.config.margin.left)
        xs = self.sequence.xs
        x = clamp(x, xs[0], xs[-1])
        return min(range(len(xs)), key=lambda i: abs(xs[i] - x))

    def pointer_to_edit(self, index: int, pointer_y: float) -> Edit:
        """
        Правка для перетаскивания точки index в координату указателя.

        Raises:
            IndexError: Если index вне последовательности
        """
        if not 0 <= index < len(self.sequence):
            raise IndexError(
                f"index {index} out of range for sequence of length {len(self.sequence)}"
            )
        return Edit(index=index, new_value=self.value_at(pointer_y))
