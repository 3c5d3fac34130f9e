"""Hive table schema to Parquet message type conversion.

The converter is a pure recursive mapping: it performs no I/O and no logging,
and every call builds a fresh, immutable tree. The wrapper and element names
below follow the legacy Hive/Parquet nesting convention and must not change,
independent readers look them up by name.
"""

from typing import Any, List, Sequence

from .errors import SchemaMismatchError, UnknownTypeError, UnsupportedTypeError
from .parquet_model import (
    GroupField, LogicalAnnotation, MessageType, PhysicalType, PrimitiveField,
    Repetition, SchemaNode,
)
from .type_model import (
    ColumnType, ListType, MapType, PrimitiveKind, PrimitiveType, StructType,
    TypeVisitor, UnionType,
)

ROOT_NAME = "hive_schema"
LIST_WRAPPER_NAME = "bag"
LIST_ELEMENT_NAME = "array_element"
MAP_WRAPPER_NAME = "map"
MAP_KEY_NAME = "key"
MAP_VALUE_NAME = "value"

PHYSICAL_TYPES = {
    PrimitiveKind.STRING: PhysicalType.BINARY,
    PrimitiveKind.INT: PhysicalType.INT32,
    PrimitiveKind.SHORT: PhysicalType.INT32,
    PrimitiveKind.BYTE: PhysicalType.INT32,
    PrimitiveKind.LONG: PhysicalType.INT64,
    PrimitiveKind.DOUBLE: PhysicalType.DOUBLE,
    PrimitiveKind.FLOAT: PhysicalType.FLOAT,
    PrimitiveKind.BOOLEAN: PhysicalType.BOOLEAN,
}

# Recognized by Hive but deliberately left without a Parquet mapping
UNSUPPORTED_KINDS = frozenset({
    PrimitiveKind.BINARY,
    PrimitiveKind.TIMESTAMP,
    PrimitiveKind.VOID,
    PrimitiveKind.UNKNOWN,
})


class SchemaConverter(TypeVisitor):
    """Maps Hive column types onto Parquet schema nodes.

    Stateless; a single instance may be shared across threads.
    """

    def convert(self, column_names: Sequence[str], column_types: Sequence[ColumnType]) -> MessageType:
        """Convert a table schema into a Parquet message type rooted at ``hive_schema``."""
        return MessageType(ROOT_NAME, fields=self.convert_types(column_names, column_types))

    def convert_types(self, column_names: Sequence[str], column_types: Sequence[ColumnType]) -> List[SchemaNode]:
        if len(column_names) != len(column_types):
            raise SchemaMismatchError(column_names, column_types)
        return [
            self.convert_type(name, type_)
            for name, type_ in zip(column_names, column_types)
        ]

    def convert_type(self, name: str, type_: Any, repetition: Repetition = Repetition.OPTIONAL) -> SchemaNode:
        if not isinstance(type_, ColumnType):
            raise UnknownTypeError(type_)
        return type_.accept(self, name, repetition)

    def convert_array(self, name: str, element_type: ColumnType,
                      repetition: Repetition = Repetition.OPTIONAL) -> GroupField:
        """Build the list group; a list used as a map key inherits REQUIRED."""
        # optional group <name> (LIST) { repeated group bag { optional <element> array_element; } }
        wrapper = GroupField(
            LIST_WRAPPER_NAME,
            Repetition.REPEATED,
            (self.convert_type(LIST_ELEMENT_NAME, element_type),),
        )
        return GroupField(name, repetition, (wrapper,), LogicalAnnotation.LIST)

    def convert_struct(self, name: str, struct_type: StructType,
                       repetition: Repetition = Repetition.OPTIONAL) -> GroupField:
        children = self.convert_types(struct_type.field_names, struct_type.field_types)
        return GroupField(name, repetition, tuple(children))

    def convert_map(self, name: str, key_type: ColumnType, value_type: ColumnType,
                    repetition: Repetition = Repetition.OPTIONAL) -> GroupField:
        # Map keys can never be absent
        key = self.convert_type(MAP_KEY_NAME, key_type, Repetition.REQUIRED)
        value = self.convert_type(MAP_VALUE_NAME, value_type)
        wrapper = GroupField(
            MAP_WRAPPER_NAME,
            Repetition.REPEATED,
            (key, value),
            LogicalAnnotation.MAP_KEY_VALUE,
        )
        return GroupField(name, repetition, (wrapper,), LogicalAnnotation.MAP)

    def visit_primitive(self, primitive: PrimitiveType, name: str, repetition: Repetition) -> PrimitiveField:
        kind = primitive.known_kind
        if kind is None:
            raise UnknownTypeError(primitive.type_name)
        if kind in UNSUPPORTED_KINDS:
            raise UnsupportedTypeError(kind.value)
        return PrimitiveField(name, PHYSICAL_TYPES[kind], repetition)

    def visit_list(self, list_type: ListType, name: str, repetition: Repetition) -> GroupField:
        return self.convert_array(name, list_type.element_type, repetition)

    def visit_struct(self, struct_type: StructType, name: str, repetition: Repetition) -> GroupField:
        return self.convert_struct(name, struct_type, repetition)

    def visit_map(self, map_type: MapType, name: str, repetition: Repetition) -> GroupField:
        return self.convert_map(name, map_type.key_type, map_type.value_type, repetition)

    def visit_union(self, union_type: UnionType, name: str, repetition: Repetition) -> SchemaNode:
        raise UnsupportedTypeError("union")


_converter = SchemaConverter()


def convert(column_names: Sequence[str], column_types: Sequence[ColumnType]) -> MessageType:
    """Convert parallel column name/type lists into a Parquet message type."""
    return _converter.convert(column_names, column_types)


def convert_type(name: str, type_: ColumnType, repetition: Repetition = Repetition.OPTIONAL) -> SchemaNode:
    """Convert a single named Hive type."""
    return _converter.convert_type(name, type_, repetition)
