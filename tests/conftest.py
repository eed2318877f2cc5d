"""Shared test fixtures for the namematch test suite."""

from __future__ import annotations

import pytest

from namematch.canonical import Canonicalizer


class StubCanonicalizer(Canonicalizer):
    """Deterministic canonicalizer that only trims and lower-cases.

    Punctuation is kept, which makes it easy to tell which canonicalizer
    produced a given key.
    """

    def reduce(self, text: str | None) -> str | None:
        if text is None:
            return None
        return text.strip()

    def reduce_to_lower(self, text: str | None, exceptions: str = "") -> str | None:
        if text is None:
            return None
        return text.strip().lower()


@pytest.fixture
def stub_canonicalizer() -> StubCanonicalizer:
    return StubCanonicalizer()
