"""Cluster profile API endpoints.

GET    /profiles/cluster/{distribution}          - Default profile of a distribution
POST   /profiles/cluster/{distribution}          - Store a new profile
GET    /cluster/profiles/{distribution}          - List stored profiles
PUT    /cluster/profiles/{distribution}          - Update a stored profile
DELETE /cluster/profiles/{distribution}/{name}   - Delete a stored profile
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Response
from pydantic import BaseModel

from cluster_profiles.api.dependencies import ProfileManagerDep, SettingsDep
from cluster_profiles.defaults import build_default_profile
from cluster_profiles.models.cluster import (
    ClusterProfileRequest,
    ClusterProfileResponse,
    CreateClusterRequest,
)

logger = structlog.get_logger()

router = APIRouter()


class ProfileListResponse(BaseModel):
    """Stored profile list response."""

    items: list[ClusterProfileResponse]


@router.get(
    "/profiles/cluster/{distribution}",
    response_model=CreateClusterRequest,
    response_model_exclude_none=True,
)
def get_default_profile(distribution: str, settings: SettingsDep) -> CreateClusterRequest:
    """Default cluster creation request built from the static defaults."""
    return build_default_profile(distribution, settings.defaults)


@router.post("/profiles/cluster/{distribution}", status_code=201)
async def create_profile(
    distribution: str,
    request: ClusterProfileRequest,
    profile_mgr: ProfileManagerDep,
) -> Response:
    """Store a new profile; the name must be free.

    The distribution is taken from the request body, not the path.
    """
    logger.info("api.profile.create", path_distribution=distribution, name=request.name)
    await profile_mgr.create(request)
    return Response(status_code=201)


@router.get(
    "/cluster/profiles/{distribution}",
    response_model=ProfileListResponse,
    response_model_exclude_none=True,
)
async def list_profiles(distribution: str, profile_mgr: ProfileManagerDep) -> ProfileListResponse:
    """List stored profiles of a distribution."""
    items = await profile_mgr.list(distribution)
    return ProfileListResponse(items=items)


@router.put("/cluster/profiles/{distribution}", status_code=201)
async def update_profile(
    distribution: str,
    request: ClusterProfileRequest,
    profile_mgr: ProfileManagerDep,
) -> Response:
    """Update a stored profile; the default profile is read-only."""
    logger.info("api.profile.update", path_distribution=distribution, name=request.name)
    await profile_mgr.update(request)
    return Response(status_code=201)


@router.delete("/cluster/profiles/{distribution}/{name}", status_code=200)
async def delete_profile(distribution: str, name: str, profile_mgr: ProfileManagerDep) -> Response:
    """Delete a stored profile; the default profile cannot be deleted."""
    await profile_mgr.delete(distribution, name)
    return Response(status_code=200)
