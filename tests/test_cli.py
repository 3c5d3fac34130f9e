"""Tests for CLI system."""

import json
from unittest.mock import Mock, patch

import click
import pytest
from click.testing import CliRunner

from hive2parquet.cli import main, validate_input_file
from hive2parquet.config import OutputFormat
from hive2parquet.logger import LogLevel
from hive2parquet.service import ConversionResult


class TestValidateInputFile:
    """Tests for input file validation function."""

    def test_validate_input_file_none(self):
        """Test validation with None input."""
        assert validate_input_file(None, None, None) is None

    def test_validate_input_file_nonexistent(self, temp_dir):
        """Test validation with non-existent file."""
        with pytest.raises(click.BadParameter):
            validate_input_file(None, None, str(temp_dir / "missing.json"))

    def test_validate_input_file_wrong_extension(self, temp_dir):
        """Test validation with wrong extension."""
        wrong_file = temp_dir / "columns.txt"
        wrong_file.touch()

        with pytest.raises(click.BadParameter):
            validate_input_file(None, None, str(wrong_file))

    def test_validate_input_file_valid(self, columns_file):
        """Test validation with valid JSON file."""
        assert validate_input_file(None, None, str(columns_file)) == columns_file


class TestCLIMain:
    """Tests for main CLI function."""

    def setup_method(self):
        """Set up test method."""
        self.runner = CliRunner()

    def test_cli_help(self):
        """Test CLI help output."""
        result = self.runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert "Convert a Hive table schema into a Parquet message type" in result.output
        assert "--input" in result.output
        assert "--format" in result.output

    def test_cli_version(self):
        """Test CLI version output."""
        result = self.runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_missing_input(self):
        """Test CLI with missing required input."""
        result = self.runner.invoke(main, [])

        assert result.exit_code != 0
        assert "Missing option" in result.output

    def test_cli_nonexistent_input(self, temp_dir):
        """Test CLI with non-existent input file."""
        result = self.runner.invoke(main, ['--input', str(temp_dir / "missing.json")])

        assert result.exit_code != 0
        assert "does not exist" in result.output

    def test_cli_prints_schema(self, columns_file):
        """Test end-to-end conversion to stdout."""
        result = self.runner.invoke(main, ['--input', str(columns_file)])

        assert result.exit_code == 0
        assert "message hive_schema {" in result.output
        assert "optional group tags (LIST) {" in result.output
        assert "repeated group bag {" in result.output
        assert "required binary key;" in result.output
        assert "optional group point {" in result.output

    def test_cli_json_to_file(self, columns_file, temp_dir):
        """Test writing JSON output to a file."""
        output = temp_dir / "schema.json"

        result = self.runner.invoke(main, [
            '--input', str(columns_file),
            '--output', str(output),
            '--format', 'json',
        ])

        assert result.exit_code == 0
        assert "Schema written to" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [f["name"] for f in data["fields"]] == ["id", "name", "tags", "attrs", "point"]

    def test_cli_unsupported_type(self, union_columns_file):
        """Test unsupported types fail with exit code 1."""
        result = self.runner.invoke(main, ['--input', str(union_columns_file)])

        assert result.exit_code == 1
        assert "Conversion failed" in result.output
        assert "union type not implemented" in result.output

    def test_cli_all_parameters(self, columns_file, temp_dir):
        """Test CLI with all parameters specified."""
        with patch('hive2parquet.cli.ConversionService') as mock_service_class:
            mock_service = Mock()
            mock_service.run.return_value = ConversionResult(
                True, rendered="", statistics={"columns": 5}
            )
            mock_service_class.return_value = mock_service

            result = self.runner.invoke(main, [
                '--input', str(columns_file),
                '--output', str(temp_dir / 'schema.json'),
                '--format', 'json',
                '--log-level', 'debug',
                '--compact',
            ])

            assert result.exit_code == 0

            config = mock_service_class.call_args[0][0]
            assert config.input_file == columns_file
            assert config.output_file == temp_dir / 'schema.json'
            assert config.output_format == OutputFormat.JSON
            assert config.logging.level == LogLevel.DEBUG
            assert not config.serializer.pretty

    def test_cli_config_validation_errors(self, columns_file, temp_dir):
        """Test CLI with an output directory that does not exist."""
        result = self.runner.invoke(main, [
            '--input', str(columns_file),
            '--output', str(temp_dir / "nonexistent" / "schema.txt"),
        ])

        assert result.exit_code == 1
        assert "Output directory does not exist" in result.output

    @patch('hive2parquet.cli.ConversionService')
    def test_cli_keyboard_interrupt(self, mock_service_class, columns_file):
        """Test CLI handling of keyboard interrupt."""
        mock_service = Mock()
        mock_service.run.side_effect = KeyboardInterrupt()
        mock_service_class.return_value = mock_service

        result = self.runner.invoke(main, ['--input', str(columns_file)])

        assert result.exit_code == 130
        assert "interrupted by user" in result.output
