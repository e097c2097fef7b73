"""Data models: SQLModel tables and JSON wire models."""

from cluster_profiles.models.cluster import (
    ClusterProfileRequest,
    ClusterProfileResponse,
    ClusterProperties,
    Cloud,
    CreateClusterRequest,
    Distribution,
)
from cluster_profiles.models.profile import ClusterProfile

__all__ = [
    "Cloud",
    "ClusterProfile",
    "ClusterProfileRequest",
    "ClusterProfileResponse",
    "ClusterProperties",
    "CreateClusterRequest",
    "Distribution",
]
