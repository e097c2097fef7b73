"""Manager layer - business logic."""

from cluster_profiles.managers.profile import ProfileManager

__all__ = ["ProfileManager"]
