"""
JSON Schema Contract Validators

Проверка payload'ов на границе с front end (Coordinate Mapper) до того,
как они попадут в модели. Строгое возрастание x схемой не выражается
и проверяется моделью PointSequence.

Контракты (src/core/contracts/schema/<name>.json):
- point_sequence — последовательность точек
- graph_edit — правка одной точки на одном из графиков
- graph_views — три отрисованные последовательности
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CONTRACT_NAMES: Final[tuple[str, ...]] = ("point_sequence", "graph_edit", "graph_views")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-проверка схем из каталога; результат кэшируется по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> list[str]:
        """Имена схем в каталоге (без .json), по алфавиту"""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла нет
            ValueError: Если документ не проходит meta-валидацию Draft 2020-12
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Валидатор одного контракта: ContractValidator("graph_edit")."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


@lru_cache(maxsize=None)
def validator_for(schema_name: str) -> ContractValidator:
    """Общий экземпляр валидатора встроенного контракта"""
    if schema_name not in CONTRACT_NAMES:
        raise KeyError(f"Unknown contract {schema_name!r}, expected one of: {', '.join(CONTRACT_NAMES)}")
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_point_sequence(data: Dict[str, Any]) -> None:
    validator_for("point_sequence").validate(data)


def validate_graph_edit(data: Dict[str, Any]) -> None:
    """Проверка правки до построения Edit; ValidationError при нарушении"""
    validator_for("graph_edit").validate(data)


def validate_graph_views(data: Dict[str, Any]) -> None:
    validator_for("graph_views").validate(data)
