"""Exceptions raised while converting Hive schemas."""

from typing import Any, Sequence


class SchemaConversionError(Exception):
    """Base class for all conversion failures."""


class SchemaMismatchError(SchemaConversionError):
    """Column name and column type lists differ in length."""

    def __init__(self, column_names: Sequence[str], column_types: Sequence[Any]):
        self.column_names = list(column_names)
        self.column_types = list(column_types)
        super().__init__(
            "Mismatched Hive columns and types. Hive columns names found : "
            f"{self.column_names} . And Hive types found : "
            f"{[str(t) for t in self.column_types]}"
        )


class UnsupportedTypeError(SchemaConversionError):
    """A recognized Hive type that has no Parquet mapping."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"{category} type not implemented")


class UnknownTypeError(SchemaConversionError):
    """A type descriptor matching none of the recognized categories."""

    def __init__(self, descriptor: Any):
        self.descriptor = descriptor
        super().__init__(f"Unknown type: {descriptor}")


class ColumnDefinitionError(SchemaConversionError):
    """Malformed column definition document."""
