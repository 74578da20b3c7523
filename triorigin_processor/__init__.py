"""
triorigin_processor - Batch processing for origin containment

Reads a triangle file, applies the configured batch policy and returns the
containment statistics.

Architecture:
- BatchProcessorService: Main orchestrator
- ProcessorConfig: Configuration management (YAML)
- read_records / parse_line: Input file reader
"""

from triorigin_processor.config import BatchConfig, LoggingConfig, ProcessorConfig
from triorigin_processor.reader import parse_line, read_records
from triorigin_processor.service import BatchProcessorService

__all__ = [
    "BatchConfig",
    "LoggingConfig",
    "ProcessorConfig",
    "parse_line",
    "read_records",
    "BatchProcessorService",
]
