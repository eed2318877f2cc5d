"""Canonicalization primitive used to derive reduced names and match keys."""

from __future__ import annotations

__all__ = [
    "Canonicalizer",
    "DEFAULT_CANONICALIZER",
    "GLOB_CHARS",
    "reduce",
    "reduce_to_lower",
]

# Wildcard glyphs that must survive folding so patterns can still be tokenized.
GLOB_CHARS = "*?"


class Canonicalizer:
    """Reduces raw names to their canonical forms.

    Only letters and digits survive reduction; whitespace, punctuation and
    symbols are dropped. Both operations are total, deterministic and
    idempotent, and return None for None.

    Subclass and pass an instance as ``canonicalizer=`` to swap the rules.
    """

    def reduce(self, text: str | None) -> str | None:
        """Return the canonical form of ``text``, case preserved."""
        if text is None:
            return None
        return "".join(ch for ch in text if ch.isalnum())

    def reduce_to_lower(
        self, text: str | None, exceptions: str = ""
    ) -> str | None:
        """Return the canonical lower-cased form of ``text``.

        Characters listed in ``exceptions`` are kept verbatim.
        """
        if text is None:
            return None
        parts: list[str] = []
        for ch in text:
            if ch in exceptions:
                parts.append(ch)
            elif ch.isalnum():
                # lower() can expand a char (e.g. dotted capital I)
                parts.extend(low for low in ch.lower() if low.isalnum())
        return "".join(parts)


DEFAULT_CANONICALIZER = Canonicalizer()


def reduce(text: str | None) -> str | None:
    """Reduce ``text`` with the default canonicalizer."""
    return DEFAULT_CANONICALIZER.reduce(text)


def reduce_to_lower(text: str | None, exceptions: str = "") -> str | None:
    """Reduce and lower-case ``text`` with the default canonicalizer."""
    return DEFAULT_CANONICALIZER.reduce_to_lower(text, exceptions)
