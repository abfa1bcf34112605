"""Errors raised while loading, configuring and running plugins."""

from __future__ import annotations


class PluginError(Exception):
    """Base class of every error raised by plugins and their loading."""


class ConfigError(PluginError):
    """A plugin configuration is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidDataFormatError(PluginError):
    """Data read by a plugin (a definition file, a setting) is malformed.

    ``line`` is the zero-based line number of the offending input, when known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return f"Invalid data format: {self.message}"
        return f"Invalid data format at line {self.line}: {self.message}"