"""Tests for the default canonicalization primitive."""

from __future__ import annotations

from namematch.canonical import (
    DEFAULT_CANONICALIZER,
    GLOB_CHARS,
    Canonicalizer,
    reduce,
    reduce_to_lower,
)


class TestReduce:
    def test_drops_whitespace_and_punctuation(self) -> None:
        """Only letters and digits survive reduction."""
        assert reduce("Hello, World!") == "HelloWorld"

    def test_preserves_case_and_digits(self) -> None:
        assert reduce("Zone 12-B") == "Zone12B"

    def test_keeps_unicode_letters(self) -> None:
        assert reduce("Café Bar") == "CaféBar"

    def test_none_propagates(self) -> None:
        assert reduce(None) is None

    def test_empty_and_punctuation_only(self) -> None:
        assert reduce("") == ""
        assert reduce(" -_.* ") == ""


class TestReduceToLower:
    def test_folds_case(self) -> None:
        assert reduce_to_lower("Hello, World!") == "helloworld"

    def test_wildcards_dropped_without_exceptions(self) -> None:
        assert reduce_to_lower("Hel*lo?") == "hello"

    def test_exceptions_kept_verbatim(self) -> None:
        """Glob characters survive folding when listed as exceptions."""
        assert reduce_to_lower("Hel* Lo?", GLOB_CHARS) == "hel*lo?"

    def test_idempotent(self) -> None:
        """Folding an already-folded string is a no-op."""
        for text in ["Äb-C 12", "Living Room", "İstanbul", "a*B?c"]:
            once = reduce_to_lower(text, GLOB_CHARS)
            assert reduce_to_lower(once, GLOB_CHARS) == once

    def test_none_propagates(self) -> None:
        assert reduce_to_lower(None) is None
        assert reduce_to_lower(None, GLOB_CHARS) is None


class TestCanonicalizer:
    def test_module_functions_use_default_instance(self) -> None:
        assert isinstance(DEFAULT_CANONICALIZER, Canonicalizer)
        assert DEFAULT_CANONICALIZER.reduce("A b") == reduce("A b")

    def test_subclass_overrides_rules(self, stub_canonicalizer: Canonicalizer) -> None:
        assert stub_canonicalizer.reduce_to_lower(" A-B ") == "a-b"
