"""namematch - Case and punctuation insensitive names with wildcard matching."""

from __future__ import annotations

# Canonicalization
from namematch.canonical import (
    DEFAULT_CANONICALIZER,
    GLOB_CHARS,
    Canonicalizer,
    reduce,
    reduce_to_lower,
)

# Names
from namematch.name import (
    NormalizedName,
    from_names,
    into_name,
    into_originals,
    into_reduced,
)

# Patterns
from namematch.utils.pattern import (
    LiteralToken,
    MultiWildcard,
    NamePattern,
    SingleWildcard,
    Token,
    match_tokens,
    tokenize,
    wildcard_match,
    wildcard_match_tokens,
)

# Filtering
from namematch.filter import NameFilter, NameFilterRule, filter_names

# Config
from namematch.config import Config

# Errors
from namematch.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FilterRuleError,
    InvalidInputError,
    NameMatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Canonicalization
    "Canonicalizer",
    "DEFAULT_CANONICALIZER",
    "GLOB_CHARS",
    "reduce",
    "reduce_to_lower",
    # Names
    "NormalizedName",
    "into_name",
    "into_originals",
    "into_reduced",
    "from_names",
    # Patterns
    "Token",
    "LiteralToken",
    "SingleWildcard",
    "MultiWildcard",
    "NamePattern",
    "tokenize",
    "wildcard_match_tokens",
    "match_tokens",
    "wildcard_match",
    # Filtering
    "NameFilter",
    "NameFilterRule",
    "filter_names",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "NameMatchError",
    "ConfigError",
    "ConfigNotFoundError",
    "FilterRuleError",
    "InvalidInputError",
]
