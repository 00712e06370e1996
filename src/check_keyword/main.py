"""
Main entry point for check-keyword batch conversion.

This module runs many candidate names through one classifier and
collects the results, which is the shape a code generator consumes
when it turns a whole schema into Rust identifiers.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

from check_keyword.config import Config, create_default_config
from check_keyword.core.classifier import KeywordClassifier
from check_keyword.core.status import KeywordKind, KeywordStatus
from check_keyword.exceptions import NameFileError
from check_keyword.logging_config import get_logger
from check_keyword.rust.keywords import Edition

logger = get_logger("main")

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class SafeName:
    """A candidate name together with its safe form and classification."""
    original: str
    safe: str
    status: KeywordStatus

    @property
    def changed(self) -> bool:
        return self.safe != self.original

    @property
    def is_keyword(self) -> bool:
        return self.status.is_keyword

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "safe": self.safe,
            "category": self.status.category,
            "is_keyword": self.is_keyword,
            "status": self.status.to_dict(),
        }


@dataclass
class ConversionResult:
    """Result of converting a batch of names."""
    edition: Edition
    names: List[SafeName] = field(default_factory=list)

    @property
    def changed_names(self) -> List[SafeName]:
        return [name for name in self.names if name.changed]

    def count_by_category(self) -> dict[str, int]:
        """Count names per keyword category, every category included."""
        counts = Counter(name.status.category for name in self.names)
        return {kind.value: counts.get(kind.value, 0) for kind in KeywordKind}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "edition": self.edition.value,
            "total": len(self.names),
            "changed": len(self.changed_names),
            "by_category": self.count_by_category(),
            "names": [name.to_dict() for name in self.names],
        }


def convert_names(
    names: Iterable[str],
    config: Optional[Config] = None,
) -> ConversionResult:
    """
    Classify names and compute their safe forms.

    Input order is preserved and duplicates are kept.

    Args:
        names: Candidate identifiers
        config: Configuration (uses defaults if not provided)

    Returns:
        ConversionResult with one SafeName per input name
    """
    config = config or create_default_config()
    classifier = KeywordClassifier(config.edition)
    result = ConversionResult(edition=classifier.edition)

    for name in names:
        status = classifier.keyword_status(name)
        result.names.append(SafeName(name, classifier.into_safe(name), status))

    logger.info(
        "Converted %d names for edition %s (%d changed)",
        len(result.names), result.edition.value, len(result.changed_names),
    )
    return result


def read_names(path: Path, encoding: str = "utf-8") -> List[str]:
    """
    Read candidate names from a file, one per line.

    Surrounding whitespace is stripped; blank lines and lines starting
    with '#' are skipped.

    Raises:
        NameFileError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding=encoding)
    except OSError as e:
        raise NameFileError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise NameFileError(path, f"not valid {encoding}: {e.reason}") from e

    names = []
    for line in text.splitlines():
        name = line.strip()
        if not name or name.startswith(COMMENT_PREFIX):
            continue
        names.append(name)

    logger.debug("Read %d names from %s", len(names), path)
    return names


def convert_file(path: Path, config: Optional[Config] = None) -> ConversionResult:
    """Read names from a file and convert them."""
    return convert_names(read_names(path), config)
