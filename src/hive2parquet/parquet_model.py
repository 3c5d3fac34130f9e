"""Immutable Parquet schema tree produced by the converter."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class Repetition(str, Enum):
    """Per-field multiplicity."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


class PhysicalType(str, Enum):
    """Parquet primitive encodings used by the converter."""
    BINARY = "binary"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"


class LogicalAnnotation(str, Enum):
    """Group annotations telling readers how to interpret a wrapper structure."""
    LIST = "LIST"
    MAP = "MAP"
    MAP_KEY_VALUE = "MAP_KEY_VALUE"


INDENT = "  "


@dataclass(frozen=True)
class PrimitiveField:
    """Leaf column."""
    name: str
    physical_type: PhysicalType
    repetition: Repetition = Repetition.OPTIONAL

    @property
    def is_primitive(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "repetition": self.repetition.value,
            "type": self.physical_type.value,
        }

    def render(self, depth: int = 0) -> List[str]:
        return [f"{INDENT * depth}{self.repetition.value} {self.physical_type.value} {self.name};"]

    def __str__(self) -> str:
        return "\n".join(self.render())


@dataclass(frozen=True)
class GroupField:
    """Nested group, optionally annotated as a LIST or MAP."""
    name: str
    repetition: Repetition
    fields: Tuple['SchemaNode', ...]
    annotation: Optional[LogicalAnnotation] = None

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> 'SchemaNode':
        """Return the child named ``name``."""
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self.name,
            "repetition": self.repetition.value,
        }
        if self.annotation is not None:
            result["annotation"] = self.annotation.value
        result["fields"] = [f.to_dict() for f in self.fields]
        return result

    def _header(self) -> str:
        header = f"{self.repetition.value} group {self.name}"
        if self.annotation is not None:
            header += f" ({self.annotation.value})"
        return header

    def render(self, depth: int = 0) -> List[str]:
        lines = [f"{INDENT * depth}{self._header()} {{"]
        for f in self.fields:
            lines.extend(f.render(depth + 1))
        lines.append(f"{INDENT * depth}}}")
        return lines

    def __str__(self) -> str:
        return "\n".join(self.render())


SchemaNode = Union[PrimitiveField, GroupField]


@dataclass(frozen=True)
class MessageType(GroupField):
    """Root of a Parquet schema."""
    repetition: Repetition = Repetition.REQUIRED
    fields: Tuple[SchemaNode, ...] = ()
    annotation: Optional[LogicalAnnotation] = None

    def _header(self) -> str:
        return f"message {self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }

    def to_schema_string(self) -> str:
        """Render in Parquet's textual schema notation."""
        return "\n".join(self.render()) + "\n"

    def iter_nodes(self):
        """Yield ``(depth, node)`` for every node below the root, depth-first."""
        stack = [(1, f) for f in reversed(self.fields)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            if not node.is_primitive:
                stack.extend((depth + 1, f) for f in reversed(node.fields))
