"""
Rust Keywords - The reserved-word table for each Rust edition.

This module provides the complete Rust keyword list:
- Strict keywords (always invalid as bare identifiers)
- Reserved keywords (unused by the grammar, blocked for the future)
- Weak keywords (special only in certain positions)
- Keywords added by the 2018 edition

Entries are grouped by edition so that a table for any edition can be
assembled from the 2015 base plus the overrides of each later edition.
See https://doc.rust-lang.org/reference/keywords.html
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from check_keyword.core.status import KeywordStatus, WeakRestriction
from check_keyword.exceptions import UnknownEditionError


class Edition(str, Enum):
    """Supported Rust editions."""
    E2015 = "2015"
    E2018 = "2018"

    @classmethod
    def from_value(cls, value: Union["Edition", str, int]) -> "Edition":
        """
        Resolve an edition from an enum member, a string or an int.

        Raises:
            UnknownEditionError: If the value names no supported edition
        """
        if isinstance(value, Edition):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise UnknownEditionError(value, [e.value for e in cls]) from None


DEFAULT_EDITION = Edition.E2018

_RAW = KeywordStatus.strict(can_be_raw=True)
_NOT_RAW = KeywordStatus.strict(can_be_raw=False)
_RESERVED = KeywordStatus.reserved()

# Edition 2015: the base table every later edition starts from
KEYWORDS_2015: Tuple[Tuple[str, KeywordStatus], ...] = (
    # Strict
    ("as", _RAW),
    ("break", _RAW),
    ("const", _RAW),
    ("continue", _RAW),
    ("crate", _NOT_RAW),
    ("else", _RAW),
    ("enum", _RAW),
    ("extern", _RAW),
    ("false", _RAW),
    ("fn", _RAW),
    ("for", _RAW),
    ("if", _RAW),
    ("impl", _RAW),
    ("in", _RAW),
    ("let", _RAW),
    ("loop", _RAW),
    ("match", _RAW),
    ("mod", _RAW),
    ("move", _RAW),
    ("mut", _RAW),
    ("pub", _RAW),
    ("ref", _RAW),
    ("return", _RAW),
    ("self", _NOT_RAW),
    ("Self", _NOT_RAW),
    ("static", _RAW),
    ("struct", _RAW),
    ("super", _NOT_RAW),
    ("trait", _RAW),
    ("true", _RAW),
    ("type", _RAW),
    ("unsafe", _RAW),
    ("use", _RAW),
    ("where", _RAW),
    ("while", _RAW),

    # Reserved
    ("abstract", _RESERVED),
    ("become", _RESERVED),
    ("box", _RESERVED),
    ("do", _RESERVED),
    ("final", _RESERVED),
    ("macro", _RESERVED),
    ("override", _RESERVED),
    ("priv", _RESERVED),
    ("typeof", _RESERVED),
    ("unsized", _RESERVED),
    ("virtual", _RESERVED),
    ("yield", _RESERVED),

    # Weak
    ("dyn", KeywordStatus.weak(WeakRestriction.DYN)),
    ("macro_rules", KeywordStatus.weak(WeakRestriction.NONE)),
    ("union", KeywordStatus.weak(WeakRestriction.NONE)),
    ("'static", KeywordStatus.weak(WeakRestriction.LIFETIME_OR_LOOP)),
)

# Edition 2018: new strict and reserved words; dyn becomes strict
KEYWORDS_2018: Tuple[Tuple[str, KeywordStatus], ...] = (
    ("async", _RAW),
    ("await", _RAW),
    ("dyn", _RAW),
    ("try", _RESERVED),
)

# Later editions listed oldest first; each one overrides the previous
EDITION_KEYWORDS: Dict[Edition, Tuple[Tuple[str, KeywordStatus], ...]] = {
    Edition.E2015: KEYWORDS_2015,
    Edition.E2018: KEYWORDS_2018,
}


def build_keywords(edition: Edition) -> Mapping[str, KeywordStatus]:
    """
    Assemble the read-only word -> status mapping for an edition.

    Args:
        edition: The edition whose keywords to include

    Returns:
        An immutable mapping of every keyword known in that edition
    """
    edition = Edition.from_value(edition)
    keywords: Dict[str, KeywordStatus] = {}
    for candidate in Edition:
        for word, status in EDITION_KEYWORDS[candidate]:
            keywords[word] = status
        if candidate is edition:
            break
    return MappingProxyType(keywords)
