"""Tests for the Hive column type model."""

import pytest

from hive2parquet.type_model import (
    BIGINT, INT, STRING, ListType, MapType, PrimitiveKind, PrimitiveType,
    StructField, StructType, UnionType, primitive, struct,
)


class TestPrimitiveType:
    """Tests for PrimitiveType."""

    def test_known_kind(self):
        """Test known kinds resolve to PrimitiveKind."""
        assert INT.known_kind == PrimitiveKind.INT
        assert PrimitiveType("string").known_kind == PrimitiveKind.STRING

    def test_unknown_kind(self):
        """Test unrecognized names have no known kind."""
        assert PrimitiveType("varchar(10)").known_kind is None

    def test_primitive_factory_aliases(self):
        """Test alias resolution in the factory."""
        assert primitive("long") == BIGINT
        assert primitive("SHORT").known_kind == PrimitiveKind.SHORT
        assert primitive(" int ") == INT
        assert primitive(PrimitiveKind.BYTE).kind == PrimitiveKind.BYTE

    def test_primitive_factory_keeps_unknown_names(self):
        """Test the factory preserves unrecognized names."""
        assert primitive("date").type_name == "date"


class TestCompositeTypes:
    """Tests for composite type descriptors."""

    def test_type_names(self):
        """Test Hive descriptors for nested types."""
        nested = MapType(STRING, ListType(struct([("x", INT), ("y", BIGINT)])))
        assert nested.type_name == "map<string,array<struct<x:int,y:bigint>>>"
        assert str(UnionType((INT, STRING))) == "uniontype<int,string>"

    def test_struct_field_order(self):
        """Test struct fields keep declaration order."""
        s = struct([("b", INT), ("a", STRING)])

        assert s.field_names == ("b", "a")
        assert s.field_types == (INT, STRING)

    def test_struct_accepts_pairs(self):
        """Test StructType converts plain pairs to StructField."""
        s = StructType((("a", INT),))
        assert s.fields == (StructField("a", INT),)

    def test_struct_duplicate_names(self):
        """Test duplicate member names are rejected."""
        with pytest.raises(ValueError, match="Duplicate"):
            struct([("a", INT), ("a", STRING)])

    def test_equality(self):
        """Test structural equality of types."""
        assert ListType(INT) == ListType(PrimitiveType(PrimitiveKind.INT))
        assert MapType(STRING, INT) != MapType(INT, STRING)


class TestKindNormalization:
    """Tests for case-insensitive kind matching."""

    @pytest.mark.parametrize("name,kind", [
        ("INT", PrimitiveKind.INT),
        ("String", PrimitiveKind.STRING),
        ("BIGINT", PrimitiveKind.LONG),
        ("LONG", PrimitiveKind.LONG),
        (" int ", PrimitiveKind.INT),
    ])
    def test_known_kind_ignores_case(self, name, kind):
        """Test canonical names and aliases match regardless of case."""
        assert PrimitiveType(name).known_kind == kind
