"""Viewport — Coordinate Mapper между указателем и данными графика."""

from .scales import GraphViewport, LinearScale, Margin, ViewportConfig

__all__ = [
    "GraphViewport",
    "LinearScale",
    "Margin",
    "ViewportConfig",
]
