"""
PointSequence — Модель дискретно-сэмплированной функции

Общая модель данных для всех трёх связанных графиков:
- PRIMARY: редактируемая функция f(x)
- DERIVATIVE: производная f'(x)
- ANTIDERIVATIVE: первообразная F(x)

Immutable Pydantic модели. Полная совместимость с JSON Schema
(src/core/contracts/schema/point_sequence.json).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x-координаты строго возрастают (без дубликатов и убываний)
2. Все координаты конечны (NaN/Inf запрещены)
3. Ни одна трансформация не переупорядочивает и не дедуплицирует точки
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class GraphRole(str, Enum):
    """
    Роль последовательности (какой график она представляет).

    Используется только для маршрутизации правок, на вычисления не влияет.
    """

    PRIMARY = "PRIMARY"
    DERIVATIVE = "DERIVATIVE"
    ANTIDERIVATIVE = "ANTIDERIVATIVE"

    @property
    def title(self) -> str:
        """Локализованный заголовок графика"""
        return _ROLE_TITLES[self]


_ROLE_TITLES = {
    GraphRole.PRIMARY: "Funktion f(x)",
    GraphRole.DERIVATIVE: "Ableitung f'(x)",
    GraphRole.ANTIDERIVATIVE: "Stammfunktion F(x)",
}


# =============================================================================
# MODELS
# =============================================================================


class Point(BaseModel):
    """Сэмпл (x, y). Immutable value type."""

    x: float = Field(..., description="Абсцисса сэмпла")
    y: float = Field(..., description="Значение функции в x")

    model_config = {"frozen": True, "allow_inf_nan": False}


class PointSequence(BaseModel):
    """
    Упорядоченная последовательность точек со строго возрастающим x.

    Инвариант устанавливается источником (sampling / edit) и проверяется
    при создании. Нарушение → pydantic.ValidationError (подкласс ValueError).

    Последовательность не мутирует: все операции возвращают новый экземпляр.
    Итерация по точкам выполняется через атрибут points.
    """

    points: tuple[Point, ...] = Field(
        default_factory=tuple, description="Точки в порядке возрастания x"
    )

    model_config = {"frozen": True}

    @field_validator("points")
    @classmethod
    def validate_strictly_increasing_x(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """Проверка строгого возрастания x"""
        for i in range(1, len(v)):
            if not v[i].x > v[i - 1].x:
                raise ValueError(
                    f"x must be strictly increasing: points[{i - 1}].x={v[i - 1].x} "
                    f"followed by points[{i}].x={v[i].x}"
                )
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_xy(cls, xs: Iterable[float], ys: Iterable[float]) -> "PointSequence":
        """
        Создание последовательности из параллельных списков x и y.

        Raises:
            ValueError: Если длины списков не совпадают или нарушен инвариант
        """
        xs = list(xs)
        ys = list(ys)
        if len(xs) != len(ys):
            raise ValueError(f"xs and ys must have equal length, got {len(xs)} and {len(ys)}")
        return cls(points=tuple(Point(x=x, y=y) for x, y in zip(xs, ys)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "PointSequence":
        """Создание последовательности из пар (x, y)"""
        return cls(points=tuple(Point(x=x, y=y) for x, y in pairs))

    @classmethod
    def from_payload(cls, data: dict) -> "PointSequence":
        """Десериализация из JSON-совместимого dict ({"points": [{"x", "y"}, ...]})"""
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.points)

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self.points]

    @property
    def first_y(self) -> float:
        """
        y первой точки (якорь для реконструкции).

        Raises:
            IndexError: Если последовательность пуста
        """
        if not self.points:
            raise IndexError("first_y of an empty sequence")
        return self.points[0].y

    # -------------------------------------------------------------------------
    # Трансформации (всегда возвращают новую последовательность)
    # -------------------------------------------------------------------------

    def with_y_at(self, index: int, y: float) -> "PointSequence":
        """
        Копия последовательности с заменённым y в одной точке.

        x и остальные точки не меняются.

        Raises:
            IndexError: Если index вне [0, len - 1]
        """
        if not 0 <= index < len(self.points):
            raise IndexError(f"index {index} out of range for sequence of length {len(self.points)}")
        points = list(self.points)
        points[index] = Point(x=points[index].x, y=y)
        return PointSequence(points=tuple(points))

    def with_ys(self, ys: Iterable[float]) -> "PointSequence":
        """Копия с новыми y при тех же x"""
        return PointSequence.from_xy(self.xs, ys)

    def every_nth(self, step: int) -> "PointSequence":
        """
        Прореживание: каждая step-я точка, начиная с первой.

        Raises:
            ValueError: Если step < 1
        """
        if step < 1:
            raise ValueError(f"step must be >= 1, got {step}")
        return PointSequence(points=self.points[::step])

    def to_payload(self) -> dict:
        """Сериализация в JSON-совместимый dict"""
        return self.model_dump(mode="json")


class Edit(BaseModel):
    """
    Правка одной точки, результат одного перетаскивания.

    Верхняя граница index проверяется координатором против
    последовательности, к которой применяется правка.
    """

    index: int = Field(..., ge=0, description="Индекс редактируемой точки")
    new_value: float = Field(..., description="Новое значение y")

    model_config = {"frozen": True, "allow_inf_nan": False}
