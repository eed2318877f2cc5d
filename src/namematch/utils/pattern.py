"""Wildcard pattern tokenization and matching for normalized names.

Patterns use '?' for exactly one character and '*' for any run of
characters, including none. Patterns are folded with the same transform
used to build match keys, so matching is a plain ordinal comparison that
ignores case and punctuation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Union

from namematch.canonical import DEFAULT_CANONICALIZER, GLOB_CHARS, Canonicalizer
from namematch.name import NormalizedName, into_name

__all__ = [
    "LiteralToken",
    "SingleWildcard",
    "MultiWildcard",
    "Token",
    "NamePattern",
    "tokenize",
    "wildcard_match_tokens",
    "match_tokens",
    "wildcard_match",
]


@dataclass(frozen=True)
class LiteralToken:
    """A run of literal characters."""

    text: str


@dataclass(frozen=True)
class SingleWildcard:
    """'?': matches exactly one character."""


@dataclass(frozen=True)
class MultiWildcard:
    """'*': matches zero or more characters."""


Token = Union[LiteralToken, SingleWildcard, MultiWildcard]

_SINGLE = SingleWildcard()
_MULTI = MultiWildcard()


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split an already-folded pattern into tokens.

    Consecutive '*' characters collapse into a single MultiWildcard.
    Every string is a valid pattern; only the empty string yields no tokens.
    """
    if not pattern:
        return ()
    if "?" not in pattern and "*" not in pattern:
        return (LiteralToken(pattern),)

    tokens: list[Token] = []
    buffer: list[str] = []
    for ch in pattern:
        if ch == "?" or ch == "*":
            if buffer:
                tokens.append(LiteralToken("".join(buffer)))
                buffer = []
            if ch == "?":
                tokens.append(_SINGLE)
            elif not tokens or not isinstance(tokens[-1], MultiWildcard):
                tokens.append(_MULTI)
        else:
            buffer.append(ch)
    if buffer:
        tokens.append(LiteralToken("".join(buffer)))

    return tuple(tokens)


def wildcard_match_tokens(
    pattern: str, canonicalizer: Canonicalizer | None = None
) -> tuple[Token, ...]:
    """Fold a raw pattern and tokenize it for repeated use with wildcard_match."""
    if canonicalizer is None:
        canonicalizer = DEFAULT_CANONICALIZER
    return tokenize(canonicalizer.reduce_to_lower(pattern, GLOB_CHARS))


def match_tokens(text: str, tokens: Sequence[Token]) -> bool:
    """Match a folded string against a token sequence.

    Scans left to right. When a literal following '*' occurs again later in
    the text, the later position is pushed as a retry point; if the rest of
    the pattern then fails, scanning resumes from the most recent retry.
    Only the next occurrence of each literal is recorded per pass.
    """
    text_len = len(text)
    token_count = len(tokens)

    any_chars = False
    text_idx = 0
    token_idx = 0
    backtrack: list[tuple[int, int]] = []
    # A pass resumed from a retry point is deterministic, so each point runs once.
    queued: set[tuple[int, int]] = set()

    while True:
        if backtrack:
            token_idx, text_idx = backtrack.pop()
            any_chars = True

        while token_idx < token_count:
            token = tokens[token_idx]

            if isinstance(token, SingleWildcard):
                if text_idx >= text_len:
                    break
                text_idx += 1
                any_chars = False

            elif isinstance(token, MultiWildcard):
                any_chars = True
                if token_idx == token_count - 1:
                    text_idx = text_len

            else:
                literal = token.text
                if any_chars:
                    text_idx = text.find(literal, text_idx)
                    if text_idx == -1:
                        break
                    repeat = text.find(literal, text_idx + 1)
                    if repeat >= 0 and (token_idx, repeat) not in queued:
                        queued.add((token_idx, repeat))
                        backtrack.append((token_idx, repeat))
                elif not text.startswith(literal, text_idx):
                    break

                text_idx += len(literal)
                any_chars = False

            token_idx += 1

        if token_idx == token_count and text_idx == text_len:
            return True

        if not backtrack:
            return False


def wildcard_match(
    name: NormalizedName | str | None,
    pattern: str | Sequence[Token] | NamePattern | None,
    canonicalizer: Canonicalizer | None = None,
) -> bool:
    """Check whether a name matches a wildcard pattern.

    Args:
        name: The name to test. Raw strings are normalized first.
        pattern: A raw pattern string, tokens from wildcard_match_tokens,
            or a compiled NamePattern.
        canonicalizer: Used to fold raw strings. Defaults to the module default.

    Returns:
        True if both are None or the name matches, False otherwise.
    """
    if name is None and pattern is None:
        return True
    if name is None or pattern is None:
        return False

    normalized = into_name(name, canonicalizer)
    if isinstance(pattern, str):
        tokens: Sequence[Token] = wildcard_match_tokens(pattern, canonicalizer)
    elif isinstance(pattern, NamePattern):
        tokens = pattern.tokens
    else:
        tokens = pattern
    return match_tokens(normalized.match_key, tokens)


@dataclass(frozen=True)
class NamePattern:
    """A wildcard pattern compiled once for matching many names."""

    source: str
    tokens: tuple[Token, ...] = field(compare=False)
    canonicalizer: Canonicalizer = field(
        default=DEFAULT_CANONICALIZER, compare=False, repr=False
    )

    @classmethod
    def compile(
        cls, pattern: str, canonicalizer: Canonicalizer | None = None
    ) -> NamePattern:
        if canonicalizer is None:
            canonicalizer = DEFAULT_CANONICALIZER
        return cls(
            source=pattern,
            tokens=wildcard_match_tokens(pattern, canonicalizer),
            canonicalizer=canonicalizer,
        )

    def matches(self, name: Any) -> bool:
        """Return True if ``name`` (converted with into_name) matches."""
        return wildcard_match(into_name(name, self.canonicalizer), self.tokens)

    def __str__(self) -> str:
        return self.source
