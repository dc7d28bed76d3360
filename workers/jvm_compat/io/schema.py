"""
Schema — Pydantic models for jvm_compat requests and responses.

Input validation happens here, at the boundary: a malformed platform
version or an unknown language id is rejected before the resolver runs.

Runtime contract fields (present in every response):
  package_name, resolver_version, profile_id, schema_version.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from jvm_compat import PACKAGE_NAME, RESOLVER_VERSION, SCHEMA_VERSION
from jvm_compat.core.description import ProjectDescription
from jvm_compat.core.language import DEFAULT_JVM_VERSION, Language
from jvm_compat.core.version import parse_version


# ── Request ──────────────────────────────────────────────────────────────────

class ResolveRequest(BaseModel):
    """A project-generation request to check for JVM compatibility."""
    platform_version: str = Field(..., description="Platform version, e.g. 3.2.4 or 3.2.0-RC2")
    language: str = Field("java", description="java | kotlin | groovy")
    jvm_version: str = Field(DEFAULT_JVM_VERSION, description="Requested JVM version")

    @field_validator("platform_version")
    @classmethod
    def _check_platform_version(cls, value: str) -> str:
        parse_version(value)
        return value.strip()

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        return Language.for_id(value).id

    def to_description(self) -> ProjectDescription:
        return ProjectDescription.of(self.platform_version, self.language, self.jvm_version)


# ── Response ─────────────────────────────────────────────────────────────────

class ResolveResponse(BaseModel):
    """Outcome of resolving one request."""
    package_name: str = PACKAGE_NAME
    resolver_version: str = RESOLVER_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    platform_version: str
    language: str
    requested_jvm_version: str
    resolved_jvm_version: str
    changed: bool = False
    reasons: List[str] = Field(default_factory=list)


class ProfileResponse(BaseModel):
    """The active compatibility thresholds."""
    package_name: str = PACKAGE_NAME
    resolver_version: str = RESOLVER_VERSION
    profile_id: str
    kotlin_1_9_20_or_later: str
    java_22_or_later: str
    unsupported_jvm_versions: List[str] = Field(default_factory=list)
    floor_jvm_version: str
    supported_generations: str
