"""Loader for JSON column definition documents.

A document lists the table's columns in order::

    {"columns": [
        {"name": "id", "type": "bigint"},
        {"name": "tags", "type": {"list": "string"}},
        {"name": "attrs", "type": {"map": {"key": "string", "value": "int"}}},
        {"name": "point", "type": {"struct": [{"name": "x", "type": "double"}]}},
        {"name": "either", "type": {"union": ["int", "string"]}}
    ]}

A bare string is a primitive type name. Unrecognized names are kept as-is so
that the converter reports them.
"""

import json
from pathlib import Path
from typing import Any, List, Tuple, Union

from .errors import ColumnDefinitionError
from .logger import LogLevel, create_logger
from .type_model import ColumnType, ListType, MapType, StructField, StructType, UnionType, primitive

COMPOSITE_KEYS = ("list", "array", "map", "struct", "union")


def parse_type(spec: Any, path: str = "type") -> ColumnType:
    """Build a ``ColumnType`` from its JSON representation."""
    if isinstance(spec, str):
        if not spec.strip():
            raise ColumnDefinitionError(f"{path}: empty type name")
        return primitive(spec)

    if not isinstance(spec, dict) or len(spec) != 1:
        raise ColumnDefinitionError(
            f"{path}: expected a type name or an object with one of {list(COMPOSITE_KEYS)}, got {spec!r}"
        )

    (category, body), = spec.items()
    if category in ("list", "array"):
        return ListType(parse_type(body, f"{path}.{category}"))

    if category == "map":
        if not isinstance(body, dict) or set(body) != {"key", "value"}:
            raise ColumnDefinitionError(f"{path}.map: expected an object with 'key' and 'value'")
        return MapType(
            parse_type(body["key"], f"{path}.map.key"),
            parse_type(body["value"], f"{path}.map.value"),
        )

    if category == "struct":
        if not isinstance(body, list):
            raise ColumnDefinitionError(f"{path}.struct: expected a list of fields")
        names, types = _parse_fields(body, f"{path}.struct")
        try:
            return StructType(tuple(StructField(n, t) for n, t in zip(names, types)))
        except ValueError as e:
            raise ColumnDefinitionError(f"{path}.struct: {e}") from e

    if category == "union":
        if not isinstance(body, list) or not body:
            raise ColumnDefinitionError(f"{path}.union: expected a non-empty list of types")
        return UnionType(tuple(
            parse_type(variant, f"{path}.union[{i}]") for i, variant in enumerate(body)
        ))

    raise ColumnDefinitionError(f"{path}: unknown type category {category!r}")


def _parse_fields(entries: List[Any], path: str) -> Tuple[List[str], List[ColumnType]]:
    names = []
    types = []
    for i, entry in enumerate(entries):
        entry_path = f"{path}[{i}]"
        if not isinstance(entry, dict) or "name" not in entry or "type" not in entry:
            raise ColumnDefinitionError(f"{entry_path}: expected an object with 'name' and 'type'")
        name = entry["name"]
        if not isinstance(name, str) or not name:
            raise ColumnDefinitionError(f"{entry_path}.name: expected a non-empty string")
        names.append(name)
        types.append(parse_type(entry["type"], f"{entry_path}.type"))
    return names, types


def load_columns(data: Any) -> Tuple[List[str], List[ColumnType]]:
    """Return parallel column name/type lists from a decoded document."""
    if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
        raise ColumnDefinitionError("Document must be an object with a 'columns' list")
    return _parse_fields(data["columns"], "columns")


class ColumnLoader:
    """Reads column definition files."""

    def __init__(self, level: LogLevel = LogLevel.INFO, destination: str = "stderr"):
        self.logger = create_logger(level=level, component="loader", destination=destination)

    def load(self, path: Union[str, Path]) -> Tuple[List[str], List[ColumnType]]:
        """Load column names and types from a JSON file."""
        path = Path(path)
        self.logger.debug("Reading column definitions", inputFile=str(path))

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            names, types = load_columns(data)
        except json.JSONDecodeError as e:
            self.logger.error("Invalid JSON", inputFile=str(path), line=e.lineno, col=e.colno)
            raise ColumnDefinitionError(f"{path}: invalid JSON: {e.msg} (line {e.lineno})") from e
        except UnicodeDecodeError as e:
            self.logger.error("Invalid UTF-8", inputFile=str(path), position=e.start)
            raise ColumnDefinitionError(f"{path}: invalid UTF-8 at byte {e.start}") from e
        except RecursionError as e:
            self.logger.error("Column definitions nested too deeply", inputFile=str(path))
            raise ColumnDefinitionError(f"{path}: type nesting too deep") from e

        self.logger.info("Column definitions loaded", inputFile=str(path), columns=len(names))
        return names, types
