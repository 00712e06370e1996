"""
Exception classes for check-keyword.

Keyword classification itself never raises; these exceptions belong to the
outer surfaces (configuration, name files, command line).
"""

from pathlib import Path
from typing import Iterable, Optional


class CheckKeywordError(Exception):
    """Base exception for all check-keyword errors."""

    pass


class ConfigError(CheckKeywordError):
    """Configuration error.

    Raised when a configuration value is invalid or a configuration
    file cannot be read.
    """

    pass


class UnknownEditionError(ConfigError):
    """Requested Rust edition is not supported.

    Attributes:
        edition: The edition value that was requested
        supported: The edition values that are accepted
    """

    def __init__(self, edition: object, supported: Iterable[str]):
        self.edition = edition
        self.supported = list(supported)
        super().__init__(
            f"Unknown edition '{edition}' "
            f"(supported: {', '.join(self.supported)})"
        )


class NameFileError(CheckKeywordError):
    """A file of candidate names could not be read.

    Attributes:
        path: The file that was being read
        reason: Why reading failed
    """

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "unreadable"
        super().__init__(f"{path}: {self.reason}")
