"""Exceptions raised by cidfiller."""

from __future__ import annotations


class CidFillerError(Exception):
    """Base class for all cidfiller errors."""


class ConfigError(CidFillerError):
    """A required setting is missing or malformed."""

    def __init__(self, setting: str, message: str) -> None:
        super().__init__(message)
        self.setting = setting


class ClipboardError(CidFillerError):
    """The system clipboard cannot be used."""


class CodeLookupError(CidFillerError):
    """The database could not be queried."""
