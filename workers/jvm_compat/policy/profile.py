"""
Profile — frozen compatibility configuration for JVM version resolution.

All thresholds live here.  The two platform ranges are parsed once at
import time and shared by every profile; the profile itself is immutable
and threaded through the resolver so results are reproducible given the
same profile + inputs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from jvm_compat.core.version import VersionRange, parse_range


# First platform release built on Kotlin 1.9.20.
KOTLIN_1_9_20_OR_LATER: VersionRange = parse_range("3.2.0-RC2")

# First platform release supporting Java 22.
JAVA_22_OR_LATER: VersionRange = parse_range("3.2.4")

# Legacy JVM identifiers no longer offered by any supported platform.
UNSUPPORTED_JVM_VERSIONS: Tuple[str, ...] = ("1.6", "1.7", "1.8")


@dataclass(frozen=True)
class JvmCompatProfile:
    """Immutable configuration for JVM compatibility resolution (v1)."""

    # ── Platform thresholds ───────────────────────────────────────────────
    kotlin_1_9_20_or_later: VersionRange = KOTLIN_1_9_20_OR_LATER
    java_22_or_later: VersionRange = JAVA_22_OR_LATER

    # ── JVM generations ───────────────────────────────────────────────────
    unsupported_jvm_versions: Tuple[str, ...] = UNSUPPORTED_JVM_VERSIONS
    floor_jvm_version: str = "17"
    min_generation_exclusive: int = 9
    max_generation: int = 22

    # ── Identity ──────────────────────────────────────────────────────────
    profile_id: str = "jvm-compat-v1"

    def is_supported_generation(self, generation: int) -> bool:
        return self.min_generation_exclusive < generation <= self.max_generation

    @classmethod
    def v1(cls) -> JvmCompatProfile:
        """Return the canonical v1 profile with all defaults."""
        return cls()
