"""
ProjectDescription — the mutable request record the resolver adjusts.

Owned by the caller.  Only ``language`` is ever replaced by the resolver;
``platform_version`` is read-only from its point of view.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jvm_compat.core.language import Language
from jvm_compat.core.version import Version, parse_version


@dataclass
class ProjectDescription:
    platform_version: Version
    language: Language

    @property
    def jvm_version(self) -> str:
        return self.language.jvm_version

    @property
    def is_kotlin(self) -> bool:
        return self.language.is_kotlin

    def set_language(self, language: Language) -> None:
        self.language = language

    @classmethod
    def of(
        cls,
        platform_version: str,
        language_id: str = "java",
        jvm_version: Optional[str] = None,
    ) -> ProjectDescription:
        """Convenience constructor from raw strings.

        Raises ``InvalidVersionError`` / ``UnknownLanguageError`` on bad input.
        """
        return cls(
            platform_version=parse_version(platform_version),
            language=Language.for_id(language_id, jvm_version),
        )
