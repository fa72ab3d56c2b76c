"""
Sampling — равномерное сэмплирование функций и каталог пресетов

Создаёт начальную PRIMARY последовательность:
    x_i = min_x + i * (max_x - min_x) / (count - 1),  i in [0, count)

Пресеты:
- Sinus:    sin(x)
- Cosinus:  cos(x)
- Parabel:  0.5 * x^2 - 2  (сдвиг/масштаб для удобного отображения)
- Kubisch:  0.2 * x^3
- Linear:   x
- Konstant: 1
"""

import math
from dataclasses import dataclass
from typing import Callable, Final

from src.core.domain.point_sequence import PointSequence
from src.core.math.numerical_safeguards import validate_finite

Generator = Callable[[float], float]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SamplingConfig:
    """Конфигурация сэмплирования: домен [min_x, max_x] и число сэмплов."""

    min_x: float = -math.pi
    max_x: float = math.pi
    count: int = 15


# =============================================================================
# PRESETS
# =============================================================================


@dataclass(frozen=True)
class Preset:
    """Именованная порождающая функция."""

    name: str
    func: Generator
    formula: str


PRESETS: Final[tuple[Preset, ...]] = (
    Preset("Sinus", math.sin, "sin(x)"),
    Preset("Cosinus", math.cos, "cos(x)"),
    Preset("Parabel (x²)", lambda x: 0.5 * x * x - 2, "0.5·x² − 2"),
    Preset("Kubisch (x³)", lambda x: 0.2 * x * x * x, "0.2·x³"),
    Preset("Linear (x)", lambda x: x, "x"),
    Preset("Konstant (1)", lambda x: 1.0, "1"),
)

DEFAULT_PRESET_NAME: Final[str] = PRESETS[0].name


def preset_names() -> list[str]:
    return [preset.name for preset in PRESETS]


def describe_presets() -> dict[str, str]:
    """Каталог пресетов для меню: имя → формула"""
    return {preset.name: preset.formula for preset in PRESETS}


def get_preset(name: str) -> Preset:
    """
    Поиск пресета по имени.

    Raises:
        KeyError: Если пресет не найден (сообщение содержит каталог с формулами)
    """
    for preset in PRESETS:
        if preset.name == name:
            return preset
    catalogue = ", ".join(f"{n} = {f}" for n, f in describe_presets().items())
    raise KeyError(f"Unknown preset {name!r}, expected one of: {catalogue}")


# =============================================================================
# SAMPLING
# =============================================================================


def sample_function(
    func: Generator,
    min_x: float,
    max_x: float,
    count: int,
) -> PointSequence:
    """
    Равномерное сэмплирование функции на [min_x, max_x].

    Args:
        func: Порождающая функция R → R
        min_x: Левая граница домена
        max_x: Правая граница домена (включительно)
        count: Число сэмплов (положительное целое)

    Returns:
        PointSequence из count точек. При count == 1 — единственная точка в min_x.

    Raises:
        ValueError: Если count не положительное целое, границы невалидны
            или функция вернула NaN/Inf
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")

    validate_finite(min_x, "min_x")
    validate_finite(max_x, "max_x")

    if count == 1:
        xs = [float(min_x)]
    else:
        if not max_x > min_x:
            raise ValueError(f"max_x must be > min_x, got [{min_x}, {max_x}]")
        step = (max_x - min_x) / (count - 1)
        xs = [min_x + i * step for i in range(count)]

    ys = []
    for x in xs:
        y = func(x)
        validate_finite(y, f"func({x})")
        ys.append(y)

    return PointSequence.from_xy(xs, ys)


def sample_preset(name: str, config: SamplingConfig | None = None) -> PointSequence:
    """
    Сэмплирование пресета по имени.

    Raises:
        KeyError: Если пресет не найден
    """
    config = config or SamplingConfig()
    preset = get_preset(name)
    return sample_function(preset.func, config.min_x, config.max_x, config.count)
