"""Pytest configuration and fixtures for hive2parquet tests."""

import json
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from hive2parquet.config import Config, OutputFormat
from hive2parquet.logger import LogLevel


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def columns_document() -> dict:
    """Column definitions covering every supported category."""
    return {
        "columns": [
            {"name": "id", "type": "bigint"},
            {"name": "name", "type": "string"},
            {"name": "tags", "type": {"list": "string"}},
            {"name": "attrs", "type": {"map": {"key": "string", "value": "int"}}},
            {"name": "point", "type": {"struct": [
                {"name": "x", "type": "double"},
                {"name": "y", "type": "double"},
            ]}},
        ]
    }


@pytest.fixture
def columns_file(temp_dir: Path, columns_document: dict) -> Path:
    """Write the column definitions to a JSON file."""
    path = temp_dir / "columns.json"
    path.write_text(json.dumps(columns_document), encoding="utf-8")
    return path


@pytest.fixture
def union_columns_file(temp_dir: Path) -> Path:
    """Column definitions containing an unconvertible union."""
    path = temp_dir / "union.json"
    path.write_text(json.dumps({
        "columns": [
            {"name": "a", "type": "int"},
            {"name": "u", "type": {"union": ["int", "string"]}},
        ]
    }), encoding="utf-8")
    return path


@pytest.fixture
def default_config(temp_dir: Path, columns_file: Path) -> Config:
    """Default configuration for testing."""
    config = Config(
        input_file=columns_file,
        output_file=None,
        output_format=OutputFormat.TEXT,
    )
    config.logging.level = LogLevel.ERROR  # Suppress logs in tests
    return config
