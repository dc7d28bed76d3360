"""
JVM Version Router
Compatibility check for the JVM version of a project-generation request.

Wraps the jvm_compat resolver: the request is turned into a project
description, resolved in place, and the adjusted JVM version returned
together with the reasons for every downgrade.
"""
import logging

from fastapi import APIRouter, status

from jvm_compat.io.schema import ProfileResponse, ResolveRequest, ResolveResponse  # type: ignore
from jvm_compat.policy.profile import JvmCompatProfile  # type: ignore
from jvm_compat.policy.resolver import resolve  # type: ignore

logger = logging.getLogger(__name__)


# =============================================================================
# Router
# =============================================================================

router = APIRouter()


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    status_code=status.HTTP_200_OK,
    summary="Resolve the JVM version to emit for a project request",
)
async def resolve_endpoint(request: ResolveRequest):
    """
    Downgrade the requested JVM version when the platform generation or
    the chosen language cannot support it.  Unrecognized JVM versions are
    passed through unchanged.
    """
    profile = JvmCompatProfile.v1()
    description = request.to_description()
    requested = description.jvm_version

    reasons = resolve(description, profile)

    return ResolveResponse(
        profile_id=profile.profile_id,
        platform_version=str(description.platform_version),
        language=description.language.id,
        requested_jvm_version=requested,
        resolved_jvm_version=description.jvm_version,
        changed=description.jvm_version != requested,
        reasons=reasons,
    )


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Show the active compatibility thresholds",
)
async def profile_endpoint():
    """Return the frozen v1 profile."""
    profile = JvmCompatProfile.v1()
    return ProfileResponse(
        profile_id=profile.profile_id,
        kotlin_1_9_20_or_later=str(profile.kotlin_1_9_20_or_later),
        java_22_or_later=str(profile.java_22_or_later),
        unsupported_jvm_versions=list(profile.unsupported_jvm_versions),
        floor_jvm_version=profile.floor_jvm_version,
        supported_generations=(
            f"({profile.min_generation_exclusive},{profile.max_generation}]"
        ),
    )
