"""
check-keyword - Check whether strings are Rust keywords and make them safe.

This package classifies candidate identifiers against the Rust keyword
list of a given edition and converts keywords into names that can be
emitted as Rust identifiers: ``r#match`` for keywords that allow the
raw-identifier escape, ``self_`` for the ones that do not.

Only strict and reserved keywords count as keywords; weak keywords are
reported by keyword_status but not by is_keyword. Inputs are assumed to
be valid identifiers in every way except for colliding with a keyword.

Basic Usage:
    from check_keyword import is_keyword, into_safe, keyword_status

    is_keyword("match")       # True
    into_safe("match")        # "r#match"
    into_safe("self")         # "self_"
    into_safe("not_keyword")  # "not_keyword"

    # Rust 2015 has no async/await keywords
    into_safe("async", edition="2015")   # "async"

    # Batch conversion
    from check_keyword import convert_names
    result = convert_names(["type", "name", "self"])

Command-Line Usage:
    check-keyword type name self
    check-keyword --file fields.txt --edition 2015 --json
"""

__version__ = "0.3.0"

from check_keyword.exceptions import (
    CheckKeywordError,
    ConfigError,
    NameFileError,
    UnknownEditionError,
)

from check_keyword.config import Config, create_default_config
from check_keyword.core.classifier import (
    RAW_PREFIX,
    SAFE_SUFFIX,
    KeywordClassifier,
    KeywordTable,
    get_keyword_table,
    into_safe,
    is_keyword,
    keyword_category,
    keyword_status,
    to_safe,
)
from check_keyword.core.status import KeywordKind, KeywordStatus, WeakRestriction
from check_keyword.rust.keywords import DEFAULT_EDITION, Edition
from check_keyword.main import (
    ConversionResult,
    SafeName,
    convert_file,
    convert_names,
    read_names,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "is_keyword",
    "keyword_status",
    "keyword_category",
    "into_safe",
    "to_safe",
    "KeywordClassifier",
    "KeywordTable",
    "get_keyword_table",
    "RAW_PREFIX",
    "SAFE_SUFFIX",
    # Batch API
    "convert_names",
    "convert_file",
    "read_names",
    "ConversionResult",
    "SafeName",
    # Configuration
    "Config",
    "create_default_config",
    "Edition",
    "DEFAULT_EDITION",
    # Data Types
    "KeywordKind",
    "KeywordStatus",
    "WeakRestriction",
    # Exceptions
    "CheckKeywordError",
    "ConfigError",
    "UnknownEditionError",
    "NameFileError",
]
