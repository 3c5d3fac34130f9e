"""hive2parquet: Hive table schema to Parquet schema converter."""

__version__ = "0.1.0"

from .converter import SchemaConverter, convert
from .errors import (
    SchemaConversionError, SchemaMismatchError, UnknownTypeError, UnsupportedTypeError,
)
from .parquet_model import GroupField, MessageType, PrimitiveField

__all__ = [
    "SchemaConverter",
    "convert",
    "SchemaConversionError",
    "SchemaMismatchError",
    "UnknownTypeError",
    "UnsupportedTypeError",
    "GroupField",
    "MessageType",
    "PrimitiveField",
]
