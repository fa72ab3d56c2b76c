"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе с front end.
"""

from .validators import (
    CONTRACT_NAMES,
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    validate_graph_edit,
    validate_graph_views,
    validate_point_sequence,
    validator_for,
)

__all__ = [
    # Constants
    "CONTRACT_NAMES",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "validator_for",
    "validate_point_sequence",
    "validate_graph_edit",
    "validate_graph_views",
]
