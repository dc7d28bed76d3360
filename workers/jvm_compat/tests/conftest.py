"""
Test fixtures for jvm_compat.

Pure-Python: descriptions are built from raw strings, no app, no IO.
"""
from __future__ import annotations

from typing import Callable

import pytest

from jvm_compat.core.description import ProjectDescription
from jvm_compat.policy.profile import JvmCompatProfile
from jvm_compat.policy.resolver import resolve


@pytest.fixture
def profile() -> JvmCompatProfile:
    return JvmCompatProfile.v1()


@pytest.fixture
def resolved() -> Callable[..., str]:
    """Resolve a description built from raw strings; return the JVM version."""

    def _resolved(jvm_version: str, platform_version: str = "3.2.4", language: str = "java") -> str:
        description = ProjectDescription.of(platform_version, language, jvm_version)
        resolve(description)
        return description.jvm_version

    return _resolved
