"""Error hierarchy for namematch."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "NameMatchError",
    "ConfigNotFoundError",
    "ConfigError",
    "FilterRuleError",
    "InvalidInputError",
    "ErrorCodes",
]


class NameMatchError(Exception):
    """Base error for all namematch errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(NameMatchError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigError(NameMatchError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class FilterRuleError(NameMatchError):
    """Raised when a name filter rule is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="FILTER_RULE_ERROR", message=message, **kwargs)


class InvalidInputError(NameMatchError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All namematch error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.FILTER_RULE_ERROR:
            handle_bad_rule()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    FILTER_RULE_ERROR = "FILTER_RULE_ERROR"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
