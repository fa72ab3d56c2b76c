"""Reconstruction Coordinator — синхронизация трёх связанных графиков.

Инвариант согласованности: PRIMARY, differentiate(PRIMARY) и
integrate(PRIMARY, C) всегда взаимно согласованы.

Правка возможна на любом из трёх графиков:
- PRIMARY: замена одной точки f(x)
- DERIVATIVE: правка f'(x) → integrate(правленая f', C = PRIMARY[0].y) → новая PRIMARY
- ANTIDERIVATIVE: правка F(x) → differentiate(правленая F) → новая PRIMARY

После каждой правки обе производные последовательности пересчитываются
целиком из новой PRIMARY. Инкрементального обновления нет: дифференцирование
и трапеции не являются точными обратными на дискретных данных.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from src.core.contracts import validate_graph_edit
from src.core.domain.point_sequence import Edit, GraphRole, PointSequence
from src.core.math.differentiation import differentiate
from src.core.math.integration import integrate
from src.core.math.numerical_safeguards import clamp
from src.core.math.sampling import DEFAULT_PRESET_NAME, SamplingConfig, sample_preset

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EditIndexOutOfRange(IndexError):
    """
    Индекс правки вне [0, len - 1] редактируемой последовательности.

    Нарушение контракта вызывающей стороной (Coordinate Mapper).
    Состояние координатора при этом не меняется.
    """

    def __init__(self, role: GraphRole, index: int, length: int):
        self.role = role
        self.index = index
        self.length = length
        super().__init__(
            f"Edit index {index} out of range for {role.value} sequence of length {length}"
        )


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SyncConfig:
    """Конфигурация координатора.

    - antiderivative_constant: константа интегрирования для графика F(x)
    - reconstructed_bounds: опциональные границы (min, max) для PRIMARY,
      восстановленной из правки f'(x) или F(x). None — без ограничения.
    """

    antiderivative_constant: float = 0.0
    reconstructed_bounds: Optional[tuple[float, float]] = None

    def __post_init__(self):
        if self.reconstructed_bounds is not None:
            low, high = self.reconstructed_bounds
            if low > high:
                raise ValueError(
                    f"reconstructed_bounds must be (min, max) with min <= max, got {self.reconstructed_bounds}"
                )


# =============================================================================
# VIEWS & RESULT
# =============================================================================


@dataclass(frozen=True)
class GraphViews:
    """Три отрисованные последовательности."""

    primary: PointSequence = field(default_factory=PointSequence)
    derivative: PointSequence = field(default_factory=PointSequence)
    antiderivative: PointSequence = field(default_factory=PointSequence)

    def get(self, role: GraphRole) -> PointSequence:
        """Последовательность по роли"""
        if role == GraphRole.PRIMARY:
            return self.primary
        if role == GraphRole.DERIVATIVE:
            return self.derivative
        return self.antiderivative

    def to_payload(self) -> Dict[str, Any]:
        """Сериализация в JSON-совместимый dict (контракт graph_views)"""
        return {
            "primary": self.primary.to_payload(),
            "derivative": self.derivative.to_payload(),
            "antiderivative": self.antiderivative.to_payload(),
        }


@dataclass(frozen=True)
class EditResult:
    """Результат применения правки."""

    role: GraphRole
    index: int
    new_value: float

    # Константа интегрирования, использованная при реконструкции (только DERIVATIVE)
    anchor: Optional[float]

    previous_views: GraphViews
    views: GraphViews

    # Для отладки
    details: str


# =============================================================================
# PURE FUNCTIONS
# =============================================================================


def derive_views(primary: PointSequence, antiderivative_constant: float = 0.0) -> GraphViews:
    """Полный пересчёт DERIVATIVE и ANTIDERIVATIVE из PRIMARY"""
    return GraphViews(
        primary=primary,
        derivative=differentiate(primary),
        antiderivative=integrate(primary, antiderivative_constant),
    )


def bound_sequence(
    sequence: PointSequence,
    bounds: Optional[tuple[float, float]],
    keep_first: bool = False,
) -> PointSequence:
    """
    Ограничение y последовательности в [min, max]; None — без изменений.

    keep_first=True оставляет первую точку (якорь) без ограничения.
    """
    if bounds is None:
        return sequence
    low, high = bounds
    ys = [clamp(y, low, high) for y in sequence.ys]
    if keep_first and ys:
        ys[0] = sequence.first_y
    return sequence.with_ys(ys)


def check_edit_index(sequence: PointSequence, role: GraphRole, edit: Edit) -> None:
    """
    Проверка индекса правки против редактируемой последовательности.

    Raises:
        EditIndexOutOfRange: Если index >= len(sequence)
    """
    if edit.index >= len(sequence):
        raise EditIndexOutOfRange(role, edit.index, len(sequence))


# =============================================================================
# COORDINATOR
# =============================================================================


class ReconstructionCoordinator:
    """Координатор правок трёх связанных графиков.

    Единственная точка мутации — apply_edit (или apply_edit_payload для
    JSON-данных от front end). Каждая правка:
    1. Проверяет индекс против последней отрисованной версии своего графика
    2. Строит новую PRIMARY
    3. Пересчитывает DERIVATIVE и ANTIDERIVATIVE из новой PRIMARY

    Частичного обновления (только одного производного графика) нет.
    Значения правок не ограничиваются повторно: clamp выполняет вызывающая сторона.
    """

    def __init__(
        self,
        config: Optional[SyncConfig] = None,
        sampling_config: Optional[SamplingConfig] = None,
        initial: Optional[PointSequence] = None,
    ):
        """
        Args:
            config: конфигурация синхронизации
            sampling_config: домен и число сэмплов для пресетов
            initial: начальная PRIMARY (по умолчанию пресет Sinus)
        """
        self.config = config or SyncConfig()
        self.sampling_config = sampling_config or SamplingConfig()

        self._views = GraphViews()
        self._handlers: Dict[GraphRole, Callable[[Edit], EditResult]] = {
            GraphRole.PRIMARY: self.edit_primary,
            GraphRole.DERIVATIVE: self.edit_derivative,
            GraphRole.ANTIDERIVATIVE: self.edit_antiderivative,
        }

        if initial is not None:
            self.load(initial)
        else:
            self.reset()

    @property
    def views(self) -> GraphViews:
        """Последние отрисованные последовательности"""
        return self._views

    # -------------------------------------------------------------------------
    # Полная замена PRIMARY
    # -------------------------------------------------------------------------

    def load(self, primary: PointSequence) -> GraphViews:
        """Замена PRIMARY целиком и пересчёт производных графиков"""
        self._views = derive_views(primary, self.config.antiderivative_constant)
        logger.debug("Loaded PRIMARY with %d points", len(primary))
        return self._views

    def load_preset(self, name: str) -> GraphViews:
        """
        Загрузка пресета по имени.

        Raises:
            KeyError: Если пресет не найден
        """
        return self.load(sample_preset(name, self.sampling_config))

    def reset(self) -> GraphViews:
        """Возврат к пресету по умолчанию (Sinus)"""
        return self.load_preset(DEFAULT_PRESET_NAME)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def apply_edit(self, role: GraphRole | str, edit: Edit) -> EditResult:
        """Применение правки к графику role.

        Args:
            role: какой график был отредактирован
            edit: (index, new_value), значение уже ограничено вызывающей стороной

        Returns:
            EditResult с новыми views

        Raises:
            EditIndexOutOfRange: если индекс вне редактируемой последовательности
            ValueError: если role неизвестна
        """
        return self._handlers[GraphRole(role)](edit)

    def apply_edit_payload(self, payload: Dict[str, Any]) -> EditResult:
        """
        Применение правки из JSON-совместимого dict
        ({"role": ..., "index": ..., "new_value": ...}).

        Raises:
            jsonschema.ValidationError: Если payload не соответствует graph_edit
            pydantic.ValidationError: Если new_value NaN/Inf
            EditIndexOutOfRange: Если индекс вне редактируемой последовательности
        """
        validate_graph_edit(payload)
        edit = Edit(index=payload["index"], new_value=payload["new_value"])
        return self.apply_edit(payload["role"], edit)

    # -------------------------------------------------------------------------
    # Операции правки
    # -------------------------------------------------------------------------

    def edit_primary(self, edit: Edit) -> EditResult:
        """Правка f(x): замена одной точки, остальные точки не меняются"""
        current = self._views.primary
        check_edit_index(current, GraphRole.PRIMARY, edit)

        primary = current.with_y_at(edit.index, edit.new_value)

        return self._commit(
            role=GraphRole.PRIMARY,
            edit=edit,
            primary=primary,
            anchor=None,
            details=f"PRIMARY[{edit.index}] = {edit.new_value:.6g}",
        )

    def edit_derivative(self, edit: Edit) -> EditResult:
        """Правка f'(x): интегрирование правленой производной с якорем PRIMARY[0].y"""
        current = self._views.derivative
        check_edit_index(current, GraphRole.DERIVATIVE, edit)

        modified = current.with_y_at(edit.index, edit.new_value)

        # Якорь предотвращает вертикальный скачок всей кривой
        primary_before = self._views.primary
        anchor = primary_before.first_y if len(primary_before) else 0.0

        primary = integrate(modified, anchor)
        # PRIMARY[0] остаётся на якоре даже вне границ
        primary = bound_sequence(primary, self.config.reconstructed_bounds, keep_first=True)

        return self._commit(
            role=GraphRole.DERIVATIVE,
            edit=edit,
            primary=primary,
            anchor=anchor,
            details=f"DERIVATIVE[{edit.index}] = {edit.new_value:.6g}, integrated with C={anchor:.6g}",
        )

    def edit_antiderivative(self, edit: Edit) -> EditResult:
        """Правка F(x): дифференцирование правленой первообразной"""
        current = self._views.antiderivative
        check_edit_index(current, GraphRole.ANTIDERIVATIVE, edit)

        modified = current.with_y_at(edit.index, edit.new_value)

        primary = differentiate(modified)
        primary = bound_sequence(primary, self.config.reconstructed_bounds)

        if not len(primary):
            logger.warning(
                "ANTIDERIVATIVE edit on a %d-point sequence produced an empty PRIMARY",
                len(modified),
            )

        return self._commit(
            role=GraphRole.ANTIDERIVATIVE,
            edit=edit,
            primary=primary,
            anchor=None,
            details=f"ANTIDERIVATIVE[{edit.index}] = {edit.new_value:.6g}, differentiated",
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _commit(
        self,
        role: GraphRole,
        edit: Edit,
        primary: PointSequence,
        anchor: Optional[float],
        details: str,
    ) -> EditResult:
        """Пересчёт всех views из новой PRIMARY и фиксация состояния"""
        previous_views = self._views
        self._views = derive_views(primary, self.config.antiderivative_constant)

        logger.debug("Edit applied: %s", details)

        return EditResult(
            role=role,
            index=edit.index,
            new_value=edit.new_value,
            anchor=anchor,
            previous_views=previous_views,
            views=self._views,
            details=details,
        )
