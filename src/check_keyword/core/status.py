"""
Keyword Status - Classification tags for reserved words.

A KeywordStatus is one of four kinds:
- NOT_KEYWORD: the string is not reserved
- STRICT: never valid as a bare identifier; ``can_be_raw`` tells whether
  the ``r#`` raw-identifier escape makes it usable
- RESERVED: not used by the grammar yet but reserved for future use
- WEAK: valid as an identifier except in specific positions, described
  by a WeakRestriction
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class KeywordKind(Enum):
    """Kinds of keyword classification."""
    NOT_KEYWORD = "not_keyword"
    STRICT = "strict"
    RESERVED = "reserved"
    WEAK = "weak"


class WeakRestriction(Enum):
    """Where a weak keyword cannot be used as an identifier."""
    NONE = "none"                          # Weak for documentation only
    LIFETIME_OR_LOOP = "lifetime_or_loop"  # Lifetime or loop label name
    DYN = "dyn"                            # Leading a type path (2015)


@dataclass(frozen=True)
class KeywordStatus:
    """
    Classification of a single word.

    Use the constructors (``not_keyword``, ``strict``, ``reserved``,
    ``weak``) rather than building instances directly; they keep the
    payload fields consistent with the kind.

    Attributes:
        kind: The classification kind
        can_be_raw: For STRICT keywords, whether ``r#`` escaping is allowed
        restriction: For WEAK keywords, the restricted position
    """
    kind: KeywordKind
    can_be_raw: bool = False
    restriction: Optional[WeakRestriction] = None

    @classmethod
    def not_keyword(cls) -> "KeywordStatus":
        return NOT_KEYWORD

    @classmethod
    def strict(cls, can_be_raw: bool) -> "KeywordStatus":
        return cls(KeywordKind.STRICT, can_be_raw=can_be_raw)

    @classmethod
    def reserved(cls) -> "KeywordStatus":
        return cls(KeywordKind.RESERVED)

    @classmethod
    def weak(cls, restriction: WeakRestriction) -> "KeywordStatus":
        return cls(KeywordKind.WEAK, restriction=restriction)

    @property
    def is_strict(self) -> bool:
        return self.kind is KeywordKind.STRICT

    @property
    def is_reserved(self) -> bool:
        return self.kind is KeywordKind.RESERVED

    @property
    def is_weak(self) -> bool:
        return self.kind is KeywordKind.WEAK

    @property
    def is_keyword(self) -> bool:
        """True for strict and reserved words; weak keywords do not count."""
        return self.kind in (KeywordKind.STRICT, KeywordKind.RESERVED)

    @property
    def category(self) -> str:
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.kind is KeywordKind.STRICT:
            data["can_be_raw"] = self.can_be_raw
        elif self.kind is KeywordKind.WEAK and self.restriction is not None:
            data["restriction"] = self.restriction.value
        return data

    def __str__(self) -> str:
        if self.kind is KeywordKind.STRICT:
            return "strict (raw)" if self.can_be_raw else "strict"
        if self.kind is KeywordKind.WEAK and self.restriction is not None:
            if self.restriction is WeakRestriction.NONE:
                return "weak"
            return f"weak ({self.restriction.value})"
        return self.kind.value.replace("_", " ")


NOT_KEYWORD = KeywordStatus(KeywordKind.NOT_KEYWORD)
