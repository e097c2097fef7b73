"""Stored cluster profile management."""

from cluster_profiles.managers.profile.profile import ProfileManager
from cluster_profiles.managers.profile.variants import (
    VARIANTS,
    ProfileVariant,
    resolve_variant,
    to_profile,
    variant_for,
)

__all__ = [
    "VARIANTS",
    "ProfileManager",
    "ProfileVariant",
    "resolve_variant",
    "to_profile",
    "variant_for",
]
