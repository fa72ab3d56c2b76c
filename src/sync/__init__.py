"""Sync — синхронизация трёх связанных графиков f(x), f'(x), F(x).

- Единая точка входа для правок (apply_edit)
- Реконструкция PRIMARY из правки производной или первообразной
- Полный пересчёт производных графиков после каждой правки
"""

from .coordinator import (
    EditIndexOutOfRange,
    EditResult,
    GraphViews,
    ReconstructionCoordinator,
    SyncConfig,
    bound_sequence,
    check_edit_index,
    derive_views,
)

__all__ = [
    "EditIndexOutOfRange",
    "EditResult",
    "GraphViews",
    "ReconstructionCoordinator",
    "SyncConfig",
    "bound_sequence",
    "check_edit_index",
    "derive_views",
]
