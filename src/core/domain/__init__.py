"""
Domain models and value objects.

Contains the shared point-sequence model used by all three linked graphs.
"""

from src.core.domain.point_sequence import (
    Edit,
    GraphRole,
    Point,
    PointSequence,
)

__all__ = [
    "Edit",
    "GraphRole",
    "Point",
    "PointSequence",
]
