"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from postindex.exceptions import PostIndexError


class ConfigError(PostIndexError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Raised when the configuration file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load configuration from {path}: {reason}")


class ConfigValidationError(ConfigError):
    """Raised when the configuration fails validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.errors = list(errors or [])
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}" for err in self.errors
        )
        message = f"Configuration validation failed with {len(self.errors)} error(s)."
        if details:
            message += f" {details}"
        super().__init__(message)
