"""
Keyword Classifier - Classifies candidate identifiers against Rust keywords.

This module provides:
- KeywordTable: the immutable keyword table of one edition
- KeywordClassifier: membership test, status lookup and safe-name transform
- Module-level is_keyword / keyword_status / into_safe helpers

Lookups are exact, case-sensitive string matches. Nothing here validates
that a string is otherwise a legal identifier; that is the caller's job.
"""

from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from check_keyword.core.status import (
    NOT_KEYWORD,
    KeywordKind,
    KeywordStatus,
    WeakRestriction,
)
from check_keyword.logging_config import get_logger
from check_keyword.rust.keywords import DEFAULT_EDITION, Edition, build_keywords

logger = get_logger("classifier")

# Prefix that marks a raw identifier (r#match)
RAW_PREFIX = "r#"

# Suffix appended to keywords that cannot be raw identifiers (self_)
SAFE_SUFFIX = "_"

EditionLike = Union[Edition, str, int]


class KeywordTable:
    """
    The read-only keyword table for one Rust edition.

    Usage:
        table = KeywordTable(Edition.E2015)
        status = table.lookup("dyn")
    """

    def __init__(self, edition: EditionLike = DEFAULT_EDITION):
        self.edition = Edition.from_value(edition)
        self._keywords: Mapping[str, KeywordStatus] = build_keywords(self.edition)

    def lookup(self, word: str) -> KeywordStatus:
        """Return the status of a word, NOT_KEYWORD if it is not in the table."""
        return self._keywords.get(word, NOT_KEYWORD)

    def entries(self) -> Iterator[Tuple[str, KeywordStatus]]:
        """Iterate over (word, status) pairs in table order."""
        return iter(self._keywords.items())

    def words(self, kind: Optional[KeywordKind] = None) -> List[str]:
        """
        List the words in the table.

        Args:
            kind: Only list words of this kind (all words if None)

        Returns:
            Words in table order
        """
        return [
            word for word, status in self._keywords.items()
            if kind is None or status.kind is kind
        ]

    def __contains__(self, word: object) -> bool:
        return word in self._keywords

    def __len__(self) -> int:
        return len(self._keywords)

    def __repr__(self) -> str:
        return f"KeywordTable(edition={self.edition.value!r}, words={len(self)})"


_TABLES: Dict[Edition, KeywordTable] = {}


def get_keyword_table(edition: EditionLike = DEFAULT_EDITION) -> KeywordTable:
    """
    Get the shared table for an edition.

    Tables never change after construction, so one instance per edition
    is built on first use and handed to every caller.
    """
    edition = Edition.from_value(edition)
    table = _TABLES.get(edition)
    if table is None:
        table = _TABLES[edition] = KeywordTable(edition)
    return table


class KeywordClassifier:
    """
    Classifies strings as Rust keywords and makes them safe to emit.

    Usage:
        classifier = KeywordClassifier(Edition.E2018)
        classifier.is_keyword("match")   # True
        classifier.into_safe("match")    # "r#match"
        classifier.into_safe("self")     # "self_"
    """

    def __init__(self, edition: EditionLike = DEFAULT_EDITION):
        self.table = get_keyword_table(edition)

    @property
    def edition(self) -> Edition:
        return self.table.edition

    def keyword_status(self, word: str) -> KeywordStatus:
        """Get the full classification of a word."""
        return self.table.lookup(word)

    def is_keyword(self, word: str) -> bool:
        """
        Check if a word is a strict or reserved keyword.

        Weak keywords are not counted; use keyword_status to see them.
        """
        return self.keyword_status(word).is_keyword

    def keyword_category(self, word: str) -> str:
        """
        Get the category of a word.

        Returns:
            Category string: "strict", "reserved", "weak" or "not_keyword"
        """
        return self.keyword_status(word).category

    def into_safe(self, word: str) -> str:
        """
        Make a word usable as a Rust identifier.

        Keywords that allow it get the ``r#`` raw-identifier prefix; those
        that do not (self, crate, 'static, ...) get a trailing underscore.
        Anything else is returned unchanged.

        Args:
            word: The candidate identifier

        Returns:
            The safe identifier
        """
        status = self.keyword_status(word)

        if (
            (status.is_strict and not status.can_be_raw)
            or (status.is_weak and status.restriction is WeakRestriction.LIFETIME_OR_LOOP)
        ):
            safe = f"{word}{SAFE_SUFFIX}"
        elif (
            status.is_keyword
            or (status.is_weak and status.restriction is WeakRestriction.DYN)
        ):
            safe = f"{RAW_PREFIX}{word}"
        else:
            return word

        logger.debug("Escaped %s keyword %r as %r", status, word, safe)
        return safe

    # The borrowing and consuming forms are the same operation on str
    to_safe = into_safe

    def __repr__(self) -> str:
        return f"KeywordClassifier(edition={self.edition.value!r})"


def get_classifier(edition: EditionLike = DEFAULT_EDITION) -> KeywordClassifier:
    """Get a classifier backed by the shared table for an edition."""
    return KeywordClassifier(edition)


def is_keyword(word: str, edition: EditionLike = DEFAULT_EDITION) -> bool:
    """
    Check if a word is a strict or reserved Rust keyword.

    Args:
        word: The word to check
        edition: The Rust edition to check against (default: 2018)

    Returns:
        True if the word cannot be used as a bare identifier
    """
    return get_keyword_table(edition).lookup(word).is_keyword


def keyword_status(word: str, edition: EditionLike = DEFAULT_EDITION) -> KeywordStatus:
    """Get the full classification of a word."""
    return get_keyword_table(edition).lookup(word)


def keyword_category(word: str, edition: EditionLike = DEFAULT_EDITION) -> str:
    """Get the category string of a word (see KeywordClassifier.keyword_category)."""
    return keyword_status(word, edition).category


def into_safe(word: str, edition: EditionLike = DEFAULT_EDITION) -> str:
    """
    Make a word usable as a Rust identifier.

    Examples:
        into_safe("match")  -> "r#match"
        into_safe("self")   -> "self_"
        into_safe("asdf")   -> "asdf"
    """
    return get_classifier(edition).into_safe(word)


to_safe = into_safe
