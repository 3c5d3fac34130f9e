"""Conversion service: load column definitions, convert, render and write."""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .config import Config, OutputFormat
from .converter import SchemaConverter
from .errors import SchemaConversionError
from .loader import ColumnLoader
from .logger import create_logger
from .parquet_model import MessageType


@dataclass
class ConversionResult:
    """Result of a table schema conversion."""
    success: bool
    schema: Optional[MessageType] = None
    rendered: Optional[str] = None
    output_file: Optional[Path] = None
    processing_time: float = 0.0
    errors: List[str] = field(default_factory=list)
    statistics: Dict[str, int] = field(default_factory=dict)


def collect_statistics(schema: MessageType) -> Dict[str, int]:
    """Count nodes of a converted schema."""
    primitive_fields = 0
    group_fields = 0
    max_depth = 0
    for depth, node in schema.iter_nodes():
        max_depth = max(max_depth, depth)
        if node.is_primitive:
            primitive_fields += 1
        else:
            group_fields += 1
    return {
        "columns": len(schema.fields),
        "primitiveFields": primitive_fields,
        "groupFields": group_fields,
        "maxDepth": max_depth,
    }


class ConversionService:
    """Runs one conversion described by a ``Config``."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = create_logger(
            level=config.logging.level,
            component="service",
            destination=config.logging.destination,
        )
        self.loader = ColumnLoader(
            level=config.logging.level,
            destination=config.logging.destination,
        )
        self.converter = SchemaConverter()

        self.logger.debug("Service initialized", outputFormat=config.output_format.value)

    def run(self) -> ConversionResult:
        """Convert the configured input; failures are reported on the result."""
        start_time = time.perf_counter()

        if self.config.input_file is None:
            self.logger.error("No input file configured")
            return ConversionResult(False, errors=["Input file is required"])

        try:
            self.logger.info("Loading column definitions", inputFile=str(self.config.input_file))
            names, types = self.loader.load(self.config.input_file)

            self.logger.conversion_event("started", len(names))
            schema = self.converter.convert(names, types)
            statistics = collect_statistics(schema)

            rendered = self.render(schema)
            if self.config.output_file is not None:
                self.config.output_file.write_text(rendered, encoding="utf-8")
                self.logger.info("Schema written", outputFile=str(self.config.output_file))

        except SchemaConversionError as e:
            self.logger.error("Conversion failed", error=str(e), type=type(e).__name__)
            return ConversionResult(
                False,
                processing_time=time.perf_counter() - start_time,
                errors=[str(e)],
            )
        except OSError as e:
            self.logger.error("I/O error during conversion", error=str(e), type=type(e).__name__)
            return ConversionResult(
                False,
                processing_time=time.perf_counter() - start_time,
                errors=[f"I/O error: {e}"],
            )
        except RecursionError:
            self.logger.error("Schema nesting too deep to convert")
            return ConversionResult(
                False,
                processing_time=time.perf_counter() - start_time,
                errors=["Schema nesting too deep to convert"],
            )

        processing_time = time.perf_counter() - start_time
        self.logger.conversion_event("completed", statistics["columns"], **statistics)
        self.logger.performance_metric("processingTime", processing_time, unit="s")

        return ConversionResult(
            True,
            schema=schema,
            rendered=rendered,
            output_file=self.config.output_file,
            processing_time=processing_time,
            statistics=statistics,
        )

    def render(self, schema: MessageType) -> str:
        """Render a schema in the configured output format."""
        if self.config.output_format == OutputFormat.JSON:
            indent = self.config.serializer.indent if self.config.serializer.pretty else None
            return json.dumps(schema.to_dict(), indent=indent) + "\n"
        return schema.to_schema_string()
