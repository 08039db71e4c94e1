from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


class ExportError(RuntimeError):
    """Raised when a channel export cannot be read or has an unexpected shape."""
