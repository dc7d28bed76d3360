"""Exceptions raised at the description boundary (never by the resolver)."""
from __future__ import annotations


class InvalidVersionError(ValueError):
    """A platform version or version range could not be parsed."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Invalid version: {text!r}")


class UnknownLanguageError(ValueError):
    """A language id does not name a supported language."""

    def __init__(self, language_id: str):
        self.language_id = language_id
        super().__init__(f"Unknown language: {language_id!r}")
