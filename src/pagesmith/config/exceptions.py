"""Custom exceptions for configuration handling."""

from __future__ import annotations

from pathlib import Path

from pagesmith.exceptions import PagesmithError


class ConfigError(PagesmithError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Raised when the site configuration file cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{self.path}': {reason}")
