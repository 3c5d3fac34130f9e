"""Configuration management for hive2parquet."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .logger import LogLevel


class OutputFormat(str, Enum):
    """Rendering of the converted schema."""
    TEXT = "text"  # message hive_schema { ... }
    JSON = "json"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    destination: str = "stderr"


@dataclass
class SerializerConfig:
    """Output serialization configuration."""
    pretty: bool = True
    indent: int = 2


@dataclass
class Config:
    """Main configuration for a conversion run."""

    input_file: Optional[Path] = None
    output_file: Optional[Path] = None
    output_format: OutputFormat = OutputFormat.TEXT

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    serializer: SerializerConfig = field(default_factory=SerializerConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return any errors."""
        errors = []

        if self.input_file is None:
            errors.append("Input file is required")
        else:
            if not self.input_file.exists():
                errors.append(f"Input file does not exist: {self.input_file}")
            if self.input_file.suffix.lower() != ".json":
                errors.append(f"Input file must have .json extension: {self.input_file}")

        if self.output_file and not self.output_file.parent.exists():
            errors.append(f"Output directory does not exist: {self.output_file.parent}")

        if self.serializer.indent < 0:
            errors.append("serializer indent must not be negative")

        return errors

    @classmethod
    def from_cli_args(cls, **kwargs) -> "Config":
        """Create config from CLI arguments."""
        config = cls()

        for key, value in kwargs.items():
            if hasattr(config, key) and value is not None:
                setattr(config, key, value)

        if kwargs.get("output_format") is not None:
            config.output_format = OutputFormat(kwargs["output_format"])

        if kwargs.get("log_level") is not None:
            config.logging.level = LogLevel(kwargs["log_level"])

        if kwargs.get("pretty") is not None:
            config.serializer.pretty = kwargs["pretty"]

        return config
