"""
Resolver — downgrade the requested JVM version to one the platform and
language can actually build.

Rules (applied in order, on the *requested* generation):

  1. Legacy ids (``1.6``/``1.7``/``1.8``) → floor (``17``), stop.
  2. Non-numeric or unsupported generation (<= 9 or > 22) → unchanged, stop.
  3. Generation below the floor → floor (``17``).
  4. Generation 21 on Kotlin before Kotlin 1.9.20 → ``17``.
  5. Generation 22:
       a. platform before Java 22 support → ``21``;
       b. Kotlin: on Kotlin 1.9.20+ → ``21``, older → ``17``.
     When both apply the Kotlin outcome wins (last write).

The resolver only ever lowers the JVM version, never changes the language
kind, and never raises.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from jvm_compat.core.description import ProjectDescription
from jvm_compat.core.language import LanguageKind
from jvm_compat.core.version import Version
from jvm_compat.policy.profile import JvmCompatProfile

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_DEFAULT_PROFILE = JvmCompatProfile.v1()


class AdjustmentReason(str, Enum):
    LEGACY_JVM_VERSION = "LEGACY_JVM_VERSION"
    JVM_BELOW_FLOOR = "JVM_BELOW_FLOOR"
    KOTLIN_PRE_1_9_20_NO_JAVA_21 = "KOTLIN_PRE_1_9_20_NO_JAVA_21"
    PLATFORM_NO_JAVA_22 = "PLATFORM_NO_JAVA_22"
    KOTLIN_1_9_NO_JAVA_22 = "KOTLIN_1_9_NO_JAVA_22"
    KOTLIN_PRE_1_9_20_NO_JAVA_22 = "KOTLIN_PRE_1_9_20_NO_JAVA_22"


# ── Generation parsing ───────────────────────────────────────────────────────

def determine_generation(
    jvm_version: str,
    profile: JvmCompatProfile | None = None,
) -> Optional[int]:
    """Return the integer generation of ``jvm_version``.

    None when the value is not a plain integer or falls outside the
    profile's supported window.
    """
    profile = profile or _DEFAULT_PROFILE
    if not isinstance(jvm_version, str) or not _INTEGER_RE.fullmatch(jvm_version):
        return None
    generation = int(jvm_version)
    return generation if profile.is_supported_generation(generation) else None


# ── Pure rule chain ──────────────────────────────────────────────────────────

def determine_jvm_version(
    platform_version: Version,
    jvm_version: str,
    kind: LanguageKind,
    profile: JvmCompatProfile | None = None,
) -> Tuple[str, List[str]]:
    """Apply the compatibility rules and return the JVM version to emit.

    Returns
    -------
    (resolved_jvm_version, reasons)
        ``reasons`` lists the :class:`AdjustmentReason` values of every
        rule that fired, in firing order.  Empty when nothing changed.
    """
    profile = profile or _DEFAULT_PROFILE
    reasons: List[str] = []
    resolved = jvm_version
    is_kotlin = kind is LanguageKind.KOTLIN

    def update_to(target: str, reason: AdjustmentReason) -> None:
        nonlocal resolved
        resolved = target
        reasons.append(reason.value)

    if jvm_version in profile.unsupported_jvm_versions:
        update_to(profile.floor_jvm_version, AdjustmentReason.LEGACY_JVM_VERSION)
        return resolved, reasons

    generation = determine_generation(jvm_version, profile)
    if generation is None:
        logger.debug("JVM version %r not resolvable, leaving unchanged", jvm_version)
        return resolved, reasons

    if generation < int(profile.floor_jvm_version):
        update_to(profile.floor_jvm_version, AdjustmentReason.JVM_BELOW_FLOOR)

    if generation == 21:
        if is_kotlin and not profile.kotlin_1_9_20_or_later.match(platform_version):
            update_to(profile.floor_jvm_version, AdjustmentReason.KOTLIN_PRE_1_9_20_NO_JAVA_21)

    if generation == 22:
        if not profile.java_22_or_later.match(platform_version):
            update_to("21", AdjustmentReason.PLATFORM_NO_JAVA_22)
        if is_kotlin:
            if profile.kotlin_1_9_20_or_later.match(platform_version):
                update_to("21", AdjustmentReason.KOTLIN_1_9_NO_JAVA_22)
            else:
                update_to(profile.floor_jvm_version, AdjustmentReason.KOTLIN_PRE_1_9_20_NO_JAVA_22)

    return resolved, reasons


# ── In-place resolution ──────────────────────────────────────────────────────

def resolve(
    description: ProjectDescription,
    profile: JvmCompatProfile | None = None,
) -> List[str]:
    """Adjust ``description.language`` in place when its JVM version is
    incompatible with the platform version or the language.

    The language is replaced with an equivalent variant carrying the new
    JVM version; it is left untouched when no rule changes the value.
    Returns the reasons of the rules that fired, in firing order.
    """
    requested = description.jvm_version
    resolved, reasons = determine_jvm_version(
        description.platform_version,
        requested,
        description.language.kind,
        profile,
    )
    if resolved != requested:
        logger.info(
            "JVM version %s -> %s for %s on platform %s (%s)",
            requested, resolved, description.language.id,
            description.platform_version, ", ".join(reasons),
        )
        description.set_language(description.language.with_jvm_version(resolved))
    return reasons
