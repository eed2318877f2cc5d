"""NormalizedName value type and bulk conversion helpers.

A NormalizedName keeps the name exactly as entered for display, alongside
two derived forms used for case-and-punctuation-insensitive comparison.
Instances are usable as dict keys and set members.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from namematch.canonical import DEFAULT_CANONICALIZER, Canonicalizer

__all__ = [
    "NormalizedName",
    "into_name",
    "into_originals",
    "into_reduced",
    "from_names",
]


@dataclass(frozen=True, eq=False)
class NormalizedName:
    """An immutable name with a reduced form and a case-folded match key.

    Attributes:
        original: The name exactly as supplied.
        reduced: Canonical form with case preserved.
        match_key: Canonical case-folded form; sole basis of equality and hashing.
    """

    original: str
    canonicalizer: Canonicalizer = field(
        default=DEFAULT_CANONICALIZER, repr=False
    )
    reduced: str = field(init=False)
    match_key: str = field(init=False)

    def __post_init__(self) -> None:
        original = self.original
        if isinstance(original, NormalizedName):
            original = original.original
        elif not isinstance(original, str):
            original = str(original)
        object.__setattr__(self, "original", original)
        object.__setattr__(self, "reduced", self.canonicalizer.reduce(original))
        object.__setattr__(
            self, "match_key", self.canonicalizer.reduce_to_lower(original)
        )

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if isinstance(other, NormalizedName):
            other_key = other.match_key
        elif isinstance(other, str):
            other_key = self.canonicalizer.reduce_to_lower(other)
        else:
            other_key = self.canonicalizer.reduce_to_lower(str(other))
        return self.match_key == other_key

    def __hash__(self) -> int:
        return hash(self.match_key)

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.original!r} {self.match_key!r}>"


def into_name(value: Any, canonicalizer: Canonicalizer | None = None) -> NormalizedName | None:
    """Convert any value into a NormalizedName.

    A NormalizedName is returned as-is, None stays None, and any other
    value is wrapped via its string representation.
    """
    if value is None:
        return None
    if isinstance(value, NormalizedName):
        return value
    if canonicalizer is None:
        canonicalizer = DEFAULT_CANONICALIZER
    if isinstance(value, str):
        return NormalizedName(value, canonicalizer)
    return NormalizedName(str(value), canonicalizer)


def into_originals(names: Iterable[NormalizedName]) -> list[str]:
    """Return the original strings of ``names``, in order."""
    return [name.original for name in names]


def into_reduced(names: Iterable[NormalizedName]) -> list[str]:
    """Return the reduced forms of ``names``, in order."""
    return [name.reduced for name in names]


def from_names(
    names: Iterable[str], canonicalizer: Canonicalizer | None = None
) -> list[NormalizedName]:
    """Build NormalizedNames from raw strings, keeping order and duplicates."""
    if canonicalizer is None:
        canonicalizer = DEFAULT_CANONICALIZER
    return [NormalizedName(name, canonicalizer) for name in names]
