"""Object-oriented model of Hive column types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple, Union


class PrimitiveKind(str, Enum):
    """Hive primitive type names."""
    STRING = "string"
    INT = "int"
    SHORT = "smallint"
    BYTE = "tinyint"
    LONG = "bigint"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"
    BINARY = "binary"
    TIMESTAMP = "timestamp"
    VOID = "void"
    UNKNOWN = "unknown"


# Alternate spellings accepted for primitive kinds
KIND_ALIASES = {
    "short": PrimitiveKind.SHORT,
    "byte": PrimitiveKind.BYTE,
    "long": PrimitiveKind.LONG,
    "integer": PrimitiveKind.INT,
}


class ColumnType(ABC):
    """Base class for all Hive column types."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Hive type descriptor, e.g. ``map<string,int>``."""

    @abstractmethod
    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        """Accept visitor pattern."""

    def __str__(self) -> str:
        return self.type_name


@dataclass(frozen=True)
class PrimitiveType(ColumnType):
    """Scalar Hive type.

    ``kind`` is the Hive type name. Names outside ``PrimitiveKind`` (for
    example ``decimal(10,2)``) can be represented, but the converter rejects
    them.
    """
    kind: str

    @property
    def type_name(self) -> str:
        return str(self.kind.value if isinstance(self.kind, PrimitiveKind) else self.kind)

    @property
    def known_kind(self) -> Union[PrimitiveKind, None]:
        """The matching ``PrimitiveKind``, or None for an unrecognized name."""
        normalized = str(self.type_name).strip().lower()
        try:
            return PrimitiveKind(normalized)
        except ValueError:
            return KIND_ALIASES.get(normalized)

    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        return visitor.visit_primitive(self, *args)


@dataclass(frozen=True)
class ListType(ColumnType):
    """Hive ``array<element>``."""
    element_type: ColumnType

    @property
    def type_name(self) -> str:
        return f"array<{self.element_type.type_name}>"

    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        return visitor.visit_list(self, *args)


@dataclass(frozen=True)
class StructField:
    """Named member of a struct."""
    name: str
    type: ColumnType


@dataclass(frozen=True)
class StructType(ColumnType):
    """Hive ``struct<name:type,...>`` with ordered, uniquely named fields."""
    fields: Tuple[StructField, ...]

    def __post_init__(self):
        fields = tuple(
            f if isinstance(f, StructField) else StructField(*f)
            for f in self.fields
        )
        seen = set()
        for f in fields:
            if f.name in seen:
                raise ValueError(f"Duplicate struct field name: {f.name}")
            seen.add(f.name)
        object.__setattr__(self, "fields", fields)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def field_types(self) -> Tuple[ColumnType, ...]:
        return tuple(f.type for f in self.fields)

    @property
    def type_name(self) -> str:
        members = ",".join(f"{f.name}:{f.type.type_name}" for f in self.fields)
        return f"struct<{members}>"

    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        return visitor.visit_struct(self, *args)


@dataclass(frozen=True)
class MapType(ColumnType):
    """Hive ``map<key,value>``."""
    key_type: ColumnType
    value_type: ColumnType

    @property
    def type_name(self) -> str:
        return f"map<{self.key_type.type_name},{self.value_type.type_name}>"

    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        return visitor.visit_map(self, *args)


@dataclass(frozen=True)
class UnionType(ColumnType):
    """Hive ``uniontype<...>``."""
    variants: Tuple[ColumnType, ...]

    def __post_init__(self):
        object.__setattr__(self, "variants", tuple(self.variants))

    @property
    def type_name(self) -> str:
        return f"uniontype<{','.join(v.type_name for v in self.variants)}>"

    def accept(self, visitor: 'TypeVisitor', *args: Any) -> Any:
        return visitor.visit_union(self, *args)


class TypeVisitor(ABC):
    """Visitor over every ``ColumnType`` variant."""

    @abstractmethod
    def visit_primitive(self, primitive: PrimitiveType, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_list(self, list_type: ListType, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_struct(self, struct_type: StructType, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_map(self, map_type: MapType, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_union(self, union_type: UnionType, *args: Any) -> Any:
        pass


def primitive(kind: Union[str, PrimitiveKind]) -> PrimitiveType:
    """Create a primitive type, resolving aliases such as ``long``."""
    if isinstance(kind, PrimitiveKind):
        return PrimitiveType(kind)
    normalized = kind.strip().lower()
    try:
        return PrimitiveType(PrimitiveKind(normalized))
    except ValueError:
        pass
    if normalized in KIND_ALIASES:
        return PrimitiveType(KIND_ALIASES[normalized])
    return PrimitiveType(kind.strip())


def struct(fields: Iterable[Tuple[str, ColumnType]]) -> StructType:
    """Create a struct type from ``(name, type)`` pairs."""
    return StructType(tuple(StructField(name, type_) for name, type_ in fields))


STRING = PrimitiveType(PrimitiveKind.STRING)
INT = PrimitiveType(PrimitiveKind.INT)
SMALLINT = PrimitiveType(PrimitiveKind.SHORT)
TINYINT = PrimitiveType(PrimitiveKind.BYTE)
BIGINT = PrimitiveType(PrimitiveKind.LONG)
DOUBLE = PrimitiveType(PrimitiveKind.DOUBLE)
FLOAT = PrimitiveType(PrimitiveKind.FLOAT)
BOOLEAN = PrimitiveType(PrimitiveKind.BOOLEAN)
BINARY = PrimitiveType(PrimitiveKind.BINARY)
TIMESTAMP = PrimitiveType(PrimitiveKind.TIMESTAMP)
VOID = PrimitiveType(PrimitiveKind.VOID)
UNKNOWN = PrimitiveType(PrimitiveKind.UNKNOWN)
