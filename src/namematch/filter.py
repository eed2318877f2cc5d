"""Name filtering: pattern-based include/exclude rules over collections of names.

This module defines the NameFilterRule dataclass, the NameFilter class that
evaluates ordered rules first-match-wins, and the filter_names helper for
one-off filtering by a single pattern.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from namematch.canonical import DEFAULT_CANONICALIZER, Canonicalizer
from namematch.errors import ConfigNotFoundError, FilterRuleError, InvalidInputError
from namematch.name import NormalizedName, into_name
from namematch.utils.pattern import NamePattern, match_tokens, wildcard_match_tokens

if TYPE_CHECKING:
    from namematch.config import Config

__all__ = ["NameFilterRule", "NameFilter", "filter_names"]

_EFFECTS = ("include", "exclude")


@dataclass
class NameFilterRule:
    """A single filter rule.

    A rule matches a name when any of its patterns matches (OR logic).
    """

    patterns: list[str]
    effect: str
    description: str = ""


class _RuleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    patterns: list[str]
    effect: Literal["include", "exclude"]
    description: str = ""


class _FilterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_effect: Literal["include", "exclude"] = "include"
    rules: list[_RuleModel]


@dataclass
class _CompiledRule:
    rule: NameFilterRule
    compiled: list[NamePattern] = field(default_factory=list)


def _validation_details(error: PydanticValidationError) -> list[dict[str, str]]:
    """Convert a pydantic ValidationError into path/message pairs."""
    details: list[dict[str, str]] = []
    for err in error.errors():
        loc = err.get("loc", ())
        path = "/" + "/".join(str(segment) for segment in loc) if loc else "/"
        details.append({"path": path, "message": err.get("msg", "")})
    return details


def _parse_rules(data: Any, source: str) -> tuple[list[NameFilterRule], str]:
    if not isinstance(data, dict):
        raise FilterRuleError(
            f"Filter config in {source} must be a mapping, got {type(data).__name__}"
        )
    try:
        parsed = _FilterModel.model_validate(data)
    except PydanticValidationError as e:
        errors = _validation_details(e)
        summary = "; ".join(f"{d['path']}: {d['message']}" for d in errors)
        raise FilterRuleError(
            f"Invalid filter config in {source}: {summary}",
            details={"source": source, "errors": errors},
            cause=e,
        ) from e

    rules = [
        NameFilterRule(
            patterns=list(r.patterns), effect=r.effect, description=r.description
        )
        for r in parsed.rules
    ]
    return rules, parsed.default_effect


class NameFilter:
    """Ordered include/exclude rules with first-match-wins evaluation.

    Thread safety:
        Internally synchronized. check and apply evaluate a snapshot of the
        rules, so they are safe to call while rules are added or removed.
    """

    def __init__(
        self,
        rules: list[NameFilterRule],
        default_effect: str = "include",
        canonicalizer: Canonicalizer | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            rules: Ordered list of rules (first match wins).
            default_effect: Effect when no rule matches ('include' or 'exclude').
            canonicalizer: Used to fold names and patterns.

        Raises:
            InvalidInputError: If default_effect or a rule effect is unknown.
        """
        if default_effect not in _EFFECTS:
            raise InvalidInputError(
                message=f"Invalid default_effect '{default_effect}', must be 'include' or 'exclude'"
            )
        self._canonicalizer = canonicalizer or DEFAULT_CANONICALIZER
        self._rules: list[_CompiledRule] = [self._compile(rule) for rule in rules]
        self._default_effect: str = default_effect
        self._yaml_path: str | None = None
        self._logger: logging.Logger = logging.getLogger("namematch.filter")
        self._lock = threading.Lock()

    @classmethod
    def load(cls, yaml_path: str, canonicalizer: Canonicalizer | None = None) -> NameFilter:
        """Load filter rules from a YAML file.

        The file holds a mapping with a required 'rules' list and an optional
        'default_effect'. Each rule has 'patterns', 'effect' and an optional
        'description'.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            FilterRuleError: If the YAML is invalid or has structural errors.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise FilterRuleError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        rules, default_effect = _parse_rules(data, yaml_path)
        name_filter = cls(rules, default_effect=default_effect, canonicalizer=canonicalizer)
        name_filter._yaml_path = yaml_path
        return name_filter

    @classmethod
    def from_config(
        cls, config: Config, canonicalizer: Canonicalizer | None = None
    ) -> NameFilter:
        """Build a filter from the 'filter' section of a Config."""
        data = {
            "default_effect": config.get("filter.default_effect", "include"),
            "rules": config.get("filter.rules", []),
        }
        rules, default_effect = _parse_rules(data, config.path or "config")
        return cls(rules, default_effect=default_effect, canonicalizer=canonicalizer)

    @property
    def default_effect(self) -> str:
        return self._default_effect

    @property
    def rules(self) -> list[NameFilterRule]:
        """A snapshot of the rules, highest priority first."""
        with self._lock:
            return [entry.rule for entry in self._rules]

    def _compile(self, rule: NameFilterRule) -> _CompiledRule:
        if rule.effect not in _EFFECTS:
            raise InvalidInputError(
                message=f"Invalid rule effect '{rule.effect}', must be 'include' or 'exclude'"
            )
        return _CompiledRule(
            rule=rule,
            compiled=[NamePattern.compile(p, self._canonicalizer) for p in rule.patterns],
        )

    def check(self, name: Any) -> bool:
        """Return True if ``name`` is included by the filter.

        None is never included.
        """
        normalized = into_name(name, self._canonicalizer)
        if normalized is None:
            return False

        with self._lock:
            rules = list(self._rules)
            default_effect = self._default_effect

        for entry in rules:
            if any(match_tokens(normalized.match_key, p.tokens) for p in entry.compiled):
                decision = entry.rule.effect == "include"
                self._logger.debug(
                    "Filter check: name=%s decision=%s rule=%s",
                    normalized.original,
                    entry.rule.effect,
                    entry.rule.description or "(no description)",
                )
                return decision

        self._logger.debug(
            "Filter check: name=%s decision=%s rule=default",
            normalized.original,
            default_effect,
        )
        return default_effect == "include"

    def apply(self, names: Iterable[Any]) -> list[NormalizedName]:
        """Return the included names, in input order."""
        result: list[NormalizedName] = []
        for name in names:
            normalized = into_name(name, self._canonicalizer)
            if normalized is not None and self.check(normalized):
                result.append(normalized)
        return result

    def add_rule(self, rule: NameFilterRule) -> None:
        """Add a rule at position 0 (highest priority)."""
        entry = self._compile(rule)
        with self._lock:
            self._rules.insert(0, entry)

    def remove_rule(self, patterns: list[str]) -> bool:
        """Remove the first rule with exactly these patterns.

        Returns:
            True if a rule was found and removed, False otherwise.
        """
        with self._lock:
            for i, entry in enumerate(self._rules):
                if entry.rule.patterns == patterns:
                    self._rules.pop(i)
                    return True
            return False

    def reload(self) -> None:
        """Re-read the rules from the original YAML file.

        Only works if the filter was created via NameFilter.load().
        Raises FilterRuleError if no YAML path was stored.
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise FilterRuleError("Cannot reload: filter was not loaded from a YAML file")
        reloaded = NameFilter.load(yaml_path, canonicalizer=self._canonicalizer)
        with self._lock:
            self._rules = reloaded._rules
            self._default_effect = reloaded._default_effect


def filter_names(
    names: Iterable[Any],
    pattern: str,
    canonicalizer: Canonicalizer | None = None,
) -> list[NormalizedName]:
    """Return the names matching ``pattern``, in order. None items are skipped."""
    tokens = wildcard_match_tokens(pattern, canonicalizer)
    result: list[NormalizedName] = []
    for name in names:
        normalized = into_name(name, canonicalizer)
        if normalized is not None and match_tokens(normalized.match_key, tokens):
            result.append(normalized)
    return result
