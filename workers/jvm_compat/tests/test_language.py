"""Tests for language variants and the project description record."""
from __future__ import annotations

import pytest

from jvm_compat.core.description import ProjectDescription
from jvm_compat.core.errors import InvalidVersionError, UnknownLanguageError
from jvm_compat.core.language import DEFAULT_JVM_VERSION, Language, LanguageKind
from jvm_compat.core.version import parse_version


class TestLanguage:
    @pytest.mark.parametrize("language_id,kind", [
        ("java", LanguageKind.JAVA),
        ("kotlin", LanguageKind.KOTLIN),
        ("groovy", LanguageKind.GROOVY),
        ("Kotlin", LanguageKind.KOTLIN),
    ])
    def test_for_id(self, language_id, kind):
        assert Language.for_id(language_id, "21").kind is kind

    def test_default_jvm_version(self):
        assert Language.for_id("java").jvm_version == DEFAULT_JVM_VERSION == "17"

    def test_empty_jvm_version_kept(self):
        assert Language.for_id("java", "").jvm_version == ""

    def test_none_jvm_version_defaults(self):
        assert Language.for_id("kotlin", None).jvm_version == DEFAULT_JVM_VERSION

    def test_unknown_id(self):
        with pytest.raises(UnknownLanguageError) as exc_info:
            Language.for_id("scala", "17")
        assert exc_info.value.language_id == "scala"

    def test_only_kotlin_is_kotlin(self):
        assert Language.for_id("kotlin").is_kotlin
        assert not Language.for_id("java").is_kotlin
        assert not Language.for_id("groovy").is_kotlin

    def test_with_jvm_version_keeps_kind(self):
        kotlin = Language.for_id("kotlin", "22")
        lowered = kotlin.with_jvm_version("21")
        assert lowered.kind is LanguageKind.KOTLIN
        assert lowered.jvm_version == "21"
        assert kotlin.jvm_version == "22"

    def test_id(self):
        assert Language.for_id("groovy").id == "groovy"


class TestProjectDescription:
    def test_of(self):
        d = ProjectDescription.of("3.2.4", "kotlin", "21")
        assert d.platform_version == parse_version("3.2.4")
        assert d.is_kotlin
        assert d.jvm_version == "21"

    def test_set_language(self):
        d = ProjectDescription.of("3.2.4", "java", "22")
        d.set_language(Language.for_id("java", "21"))
        assert d.jvm_version == "21"

    def test_empty_jvm_version_kept(self):
        assert ProjectDescription.of("3.2.4", "java", "").jvm_version == ""

    def test_invalid_platform_version(self):
        with pytest.raises(InvalidVersionError):
            ProjectDescription.of("3.2", "java", "17")

    def test_invalid_language(self):
        with pytest.raises(UnknownLanguageError):
            ProjectDescription.of("3.2.4", "cobol", "17")
