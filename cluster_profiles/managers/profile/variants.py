"""Profile variants - one per storable distribution.

A variant knows which property block of a request belongs to its
distribution and how to move it in and out of a ClusterProfile row:

- from_request: build a new row from a create request
- apply_update: fold an update request into an existing row (name is kept)
- to_response: project a row back into the wire format
"""

from __future__ import annotations

from dataclasses import dataclass

from cluster_profiles.errors import NotSupportedDistributionError, UnsupportedCloudTypeError
from cluster_profiles.models.cluster import (
    DISTRIBUTION_CLOUDS,
    AKSProperties,
    Cloud,
    ClusterProfileRequest,
    ClusterProfileResponse,
    ClusterProperties,
    Distribution,
    EC2Properties,
    EKSProperties,
    GKEProperties,
    OKEProperties,
    WireModel,
)
from cluster_profiles.models.profile import ClusterProfile
from cluster_profiles.utils.datetime import utcnow


def dump_properties(properties: WireModel) -> str:
    return properties.model_dump_json(by_alias=True, exclude_none=True)


def merge_properties(current: WireModel, incoming: WireModel) -> WireModel:
    """Overlay the fields a request actually carries onto stored properties.

    Fields left out or sent as null keep their stored value; an empty
    nodePools map does not wipe the stored pools.
    """
    updates = {}
    for field_name in incoming.model_fields_set:
        value = getattr(incoming, field_name)
        if value is None:
            continue
        if field_name == "node_pools" and not value:
            continue
        updates[field_name] = value
    return current.model_copy(update=updates)


@dataclass(frozen=True, slots=True)
class ProfileVariant:
    """Persistence mapping of one distribution's property block."""

    distribution: Distribution
    properties_model: type[WireModel]

    @property
    def cloud(self) -> Cloud:
        return DISTRIBUTION_CLOUDS[self.distribution]

    def properties_of(self, request: ClusterProfileRequest) -> WireModel | None:
        return getattr(request.properties, self.distribution.value)

    def load_properties(self, profile: ClusterProfile) -> WireModel:
        return self.properties_model.model_validate_json(profile.properties_json or "{}")

    def from_request(self, request: ClusterProfileRequest) -> ClusterProfile:
        properties = self.properties_of(request) or self.properties_model()
        now = utcnow()
        return ClusterProfile(
            name=request.name,
            cloud=self.cloud.value,
            distribution=self.distribution.value,
            location=request.location,
            properties_json=dump_properties(properties),
            created_at=now,
            updated_at=now,
        )

    def apply_update(self, profile: ClusterProfile, request: ClusterProfileRequest) -> None:
        if request.location:
            profile.location = request.location

        incoming = self.properties_of(request)
        if incoming is not None:
            merged = merge_properties(self.load_properties(profile), incoming)
            profile.properties_json = dump_properties(merged)

        profile.updated_at = utcnow()

    def to_response(self, profile: ClusterProfile) -> ClusterProfileResponse:
        return ClusterProfileResponse(
            name=profile.name,
            location=profile.location,
            cloud=profile.cloud,
            properties=ClusterProperties(
                **{self.distribution.value: self.load_properties(profile)}
            ),
        )


VARIANTS: dict[Distribution, ProfileVariant] = {
    Distribution.AKS: ProfileVariant(Distribution.AKS, AKSProperties),
    Distribution.EC2: ProfileVariant(Distribution.EC2, EC2Properties),
    Distribution.EKS: ProfileVariant(Distribution.EKS, EKSProperties),
    Distribution.GKE: ProfileVariant(Distribution.GKE, GKEProperties),
    Distribution.OKE: ProfileVariant(Distribution.OKE, OKEProperties),
}

# Convertible clouds that map onto exactly one distribution
_CLOUD_DISTRIBUTIONS: dict[Cloud, Distribution] = {
    Cloud.AZURE: Distribution.AKS,
    Cloud.GOOGLE: Distribution.GKE,
    Cloud.ORACLE: Distribution.OKE,
}


def variant_for(distribution: str) -> ProfileVariant:
    """Variant of a distribution key, as found in URL paths.

    ACSK has a default profile but no stored profiles.
    """
    try:
        return VARIANTS[Distribution(distribution)]
    except (ValueError, KeyError) as exc:
        raise NotSupportedDistributionError() from exc


def resolve_variant(request: ClusterProfileRequest) -> ProfileVariant:
    """Pick the variant a profile request belongs to.

    Amazon covers two distributions: EC2 when the ec2 block is present
    (even if eks is too), EKS otherwise.
    """
    try:
        cloud = Cloud(request.cloud)
    except ValueError as exc:
        raise UnsupportedCloudTypeError(request.cloud) from exc

    if cloud is Cloud.AMAZON:
        if request.properties.ec2 is not None:
            return VARIANTS[Distribution.EC2]
        return VARIANTS[Distribution.EKS]

    if cloud not in _CLOUD_DISTRIBUTIONS:
        raise UnsupportedCloudTypeError(request.cloud)
    return VARIANTS[_CLOUD_DISTRIBUTIONS[cloud]]


def to_profile(request: ClusterProfileRequest) -> ClusterProfile:
    """Convert a profile request into a new, unsaved ClusterProfile."""
    return resolve_variant(request).from_request(request)
