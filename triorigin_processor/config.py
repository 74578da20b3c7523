"""
Configuration schema for the batch processor.

Defines the input file, batch policy (error handling, workers, chunking)
and logging settings. Loaded from YAML; command-line flags override it.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from triorigin.pipeline import ErrorPolicy

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class BatchConfig:
    """Batch processing policy."""

    error_policy: str = "skip"  # "skip" or "abort"
    workers: int = 1
    chunk_size: int = 256

    def __post_init__(self):
        """Validate batch configuration."""
        for name in ("workers", "chunk_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )

        valid_policies = {p.value for p in ErrorPolicy}
        if not isinstance(self.error_policy, str) or self.error_policy not in valid_policies:
            raise ValueError(
                f"Invalid error_policy: {self.error_policy}. "
                f"Must be one of {valid_policies}"
            )

        if not 1 <= self.workers <= 64:
            raise ValueError(
                f"workers must be in [1, 64], got {self.workers}"
            )

        if self.chunk_size < 1:
            raise ValueError(
                f"chunk_size must be >= 1, got {self.chunk_size}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging settings."""

    level: str = "INFO"
    trace: bool = False  # log every triangle at DEBUG

    def __post_init__(self):
        """Validate logging configuration."""
        if not isinstance(self.trace, bool):
            raise ValueError(
                f"trace must be true or false, got {self.trace!r}"
            )

        if not isinstance(self.level, str) or self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )
        object.__setattr__(self, "level", self.level.upper())

    @property
    def effective_level(self) -> int:
        """Trace output needs DEBUG regardless of the configured level."""
        if self.trace:
            return logging.DEBUG
        return getattr(logging, self.level)


@dataclass(frozen=True)
class ProcessorConfig:
    """
    Main configuration for a batch run.

    Immutable after construction (frozen dataclass).
    """

    input_path: Optional[Path] = None
    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate processor configuration."""
        if self.input_path is not None:
            if not isinstance(self.input_path, (str, Path)):
                raise ValueError(
                    f"input_path must be a path string, got {type(self.input_path).__name__}"
                )
            object.__setattr__(self, "input_path", Path(self.input_path))

    def validate_input(self) -> Path:
        """
        Check that the input file exists.

        Raises:
            ValueError: no input configured
            FileNotFoundError: input missing
        """
        if self.input_path is None:
            raise ValueError("input_path is not set (config file or command line)")
        if not self.input_path.exists():
            raise FileNotFoundError(f"Input file not found: {self.input_path}")
        if not self.input_path.is_file():
            raise ValueError(f"input_path must be a file, got: {self.input_path}")
        return self.input_path

    def with_overrides(self, **overrides: Any) -> "ProcessorConfig":
        """
        Copy with command-line overrides applied; None values are ignored.

        Keys: input_path, error_policy, workers, chunk_size, level, trace
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}

        batch_keys = {"error_policy", "workers", "chunk_size"}
        logging_keys = {"level", "trace"}

        batch = replace(self.batch, **{k: overrides[k] for k in batch_keys & overrides.keys()})
        log_cfg = replace(self.logging, **{k: overrides[k] for k in logging_keys & overrides.keys()})

        return ProcessorConfig(
            input_path=overrides.get("input_path", self.input_path),
            batch=batch,
            logging=log_cfg,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProcessorConfig":
        data = data or {}
        sections = {}
        for name, section_cls in (("batch", BatchConfig), ("logging", LoggingConfig)):
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ValueError(f"{name} must be a mapping, got {type(section).__name__}")
            try:
                sections[name] = section_cls(**section)
            except TypeError as e:
                raise ValueError(f"Invalid {name} config: {e}")

        return cls(input_path=data.get("input_path"), **sections)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ProcessorConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            input_path: "triangles.txt"

            batch:
              error_policy: "skip"   # skip | abort
              workers: 1
              chunk_size: 256

            logging:
              level: "INFO"
              trace: false

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping in {yaml_path}")

        return cls.from_dict(data)
