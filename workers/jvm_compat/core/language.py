"""
Language — closed set of source-language variants for a generated project.

Each variant carries the JVM version the project targets.  Kotlin is the
alternative variant with its own JVM compatibility constraints; callers
check it through :attr:`Language.is_kotlin` rather than type identity.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from jvm_compat.core.errors import UnknownLanguageError

DEFAULT_JVM_VERSION = "17"


class LanguageKind(str, Enum):
    JAVA = "java"
    KOTLIN = "kotlin"
    GROOVY = "groovy"


@dataclass(frozen=True)
class Language:
    """A source language paired with its target JVM version."""

    kind: LanguageKind
    jvm_version: str = DEFAULT_JVM_VERSION

    @property
    def id(self) -> str:
        return self.kind.value

    @property
    def is_kotlin(self) -> bool:
        return self.kind is LanguageKind.KOTLIN

    def with_jvm_version(self, jvm_version: str) -> Language:
        """Return the same language variant targeting ``jvm_version``."""
        return replace(self, jvm_version=jvm_version)

    @classmethod
    def for_id(cls, language_id: str, jvm_version: Optional[str] = None) -> Language:
        """Build a language from its id (``java`` | ``kotlin`` | ``groovy``).

        A missing ``jvm_version`` falls back to ``DEFAULT_JVM_VERSION``.
        Raises :class:`UnknownLanguageError` for any other id.
        """
        try:
            kind = LanguageKind((language_id or "").strip().lower())
        except ValueError:
            raise UnknownLanguageError(language_id) from None
        return cls(
            kind=kind,
            jvm_version=jvm_version if jvm_version is not None else DEFAULT_JVM_VERSION,
        )
