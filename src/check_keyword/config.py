"""
Configuration - Handles check-keyword configuration.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from check_keyword.exceptions import ConfigError, UnknownEditionError
from check_keyword.rust.keywords import DEFAULT_EDITION, Edition

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """
    Configuration for keyword checking.

    Attributes:
        edition: Rust edition whose keywords are checked (default: 2018)
        names_file: File with one candidate name per line
        output_file: Write the report here instead of stdout
        json_output: Emit the JSON report instead of text lines
        changed_only: Only list names whose safe form differs
        verbose: Enable verbose output
        quiet: Suppress normal output
        log_level: Logging level
        log_file: Optional file to write logs to
    """

    edition: Edition = DEFAULT_EDITION
    names_file: Optional[Path] = None
    output_file: Optional[Path] = None

    # Output options
    json_output: bool = False
    changed_only: bool = False
    verbose: bool = False
    quiet: bool = False
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            elif isinstance(value, Enum):
                data[key] = value.value
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """
        Load configuration from JSON file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            data = json.loads(path.read_text())
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create config from dictionary.

        Raises:
            UnknownEditionError: If the edition is not supported
        """
        data = dict(data)

        for key in ("names_file", "output_file", "log_file"):
            if key in data and data[key]:
                data[key] = Path(data[key])

        if "edition" in data:
            data["edition"] = Edition.from_value(data["edition"])

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        try:
            Edition.from_value(self.edition)
        except UnknownEditionError as e:
            errors.append(str(e))

        if self.names_file and not self.names_file.is_file():
            errors.append(f"Names file does not exist: {self.names_file}")

        if self.output_file and self.output_file.exists() and self.output_file.is_dir():
            errors.append(f"Output path is a directory: {self.output_file}")

        if self.log_file and not self.log_file.parent.is_dir():
            errors.append(f"Log file directory does not exist: {self.log_file.parent}")

        if self.verbose and self.quiet:
            errors.append("verbose and quiet cannot both be set")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()

