"""ProfileManager - stored cluster profile lifecycle.

Create, list, look up, update and delete ClusterProfile rows. The reserved
default profile name can never be updated or deleted.
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from cluster_profiles.config import get_settings
from cluster_profiles.errors import (
    PersistenceError,
    ProfileAlreadyExistsError,
    ReservedProfileError,
    lookup_error,
)
from cluster_profiles.managers.profile.variants import resolve_variant, to_profile, variant_for
from cluster_profiles.models.cluster import ClusterProfileRequest, ClusterProfileResponse
from cluster_profiles.models.profile import ClusterProfile

logger = structlog.get_logger()


class ProfileManager:
    """Manages stored cluster profiles."""

    def __init__(
        self,
        db_session: AsyncSession,
        default_profile_name: str | None = None,
    ) -> None:
        self._db = db_session
        self._log = logger.bind(manager="profile")
        if default_profile_name is None:
            default_profile_name = get_settings().profiles.default_name
        self._default_name = default_profile_name

    @property
    def default_profile_name(self) -> str:
        return self._default_name

    async def exists(self, distribution: str, name: str) -> bool:
        """Check whether a profile with this name is already stored."""
        result = await self._db.execute(
            select(ClusterProfile.id).where(
                ClusterProfile.distribution == distribution,
                ClusterProfile.name == name,
            )
        )
        return result.first() is not None

    async def create(self, request: ClusterProfileRequest) -> ClusterProfile:
        """Store a new profile.

        Raises:
            UnsupportedCloudTypeError: Request cloud has no profile variant
            ProfileAlreadyExistsError: Name taken within the distribution
            PersistenceError: Database write failed
        """
        profile = to_profile(request)

        self._log.info(
            "profile.create",
            name=profile.name,
            cloud=profile.cloud,
            distribution=profile.distribution,
        )

        try:
            taken = await self.exists(profile.distribution, profile.name)
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc
        if taken:
            self._log.warning("profile.create.exists", name=profile.name)
            raise ProfileAlreadyExistsError()

        self._db.add(profile)
        try:
            await self._db.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent create of the same name
            await self._db.rollback()
            raise ProfileAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            await self._db.rollback()
            raise PersistenceError(str(exc)) from exc
        await self._db.refresh(profile)

        return profile

    async def list(self, distribution: str) -> list[ClusterProfileResponse]:
        """List stored profiles of a distribution, ordered by name."""
        variant = variant_for(distribution)
        try:
            result = await self._db.execute(
                select(ClusterProfile)
                .where(ClusterProfile.distribution == variant.distribution.value)
                .order_by(ClusterProfile.name)
            )
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc), message="Error during getting profiles") from exc

        return [variant.to_response(profile) for profile in result.scalars().all()]

    async def get(self, distribution: str, name: str) -> ClusterProfile:
        """Get a stored profile.

        Raises:
            ProfileNotFoundError: No such profile
            ProfileLookupError: Lookup failed for any other reason
        """
        variant = variant_for(distribution)
        try:
            result = await self._db.execute(
                select(ClusterProfile).where(
                    ClusterProfile.distribution == variant.distribution.value,
                    ClusterProfile.name == name,
                )
            )
            return result.scalars().one()
        except SQLAlchemyError as exc:
            self._log.warning(
                "profile.get.failed",
                distribution=distribution,
                name=name,
                error=str(exc),
            )
            raise lookup_error(exc) from exc

    async def update(self, request: ClusterProfileRequest) -> ClusterProfile:
        """Apply a request onto the stored profile of the same name.

        Raises:
            ReservedProfileError: Request targets the default profile
            UnsupportedCloudTypeError: Request cloud has no profile variant
            ProfileNotFoundError / ProfileLookupError: See get()
            PersistenceError: Database write failed
        """
        if request.name == self._default_name:
            raise ReservedProfileError(message="The default profile cannot be updated")

        variant = resolve_variant(request)

        self._log.info(
            "profile.update",
            name=request.name,
            cloud=request.cloud,
            distribution=variant.distribution.value,
        )

        profile = await self.get(variant.distribution.value, request.name)
        variant.apply_update(profile, request)

        try:
            await self._db.commit()
        except SQLAlchemyError as exc:
            await self._db.rollback()
            raise PersistenceError(str(exc), message="Error during update profile") from exc
        await self._db.refresh(profile)

        return profile

    async def delete(self, distribution: str, name: str) -> None:
        """Delete a stored profile.

        Raises:
            ReservedProfileError: Name is the default profile
            ProfileNotFoundError / ProfileLookupError: See get()
            PersistenceError: Database write failed
        """
        if name == self._default_name:
            raise ReservedProfileError(message="The default profile cannot be deleted")

        self._log.info("profile.delete", distribution=distribution, name=name)

        profile = await self.get(distribution, name)

        try:
            await self._db.delete(profile)
            await self._db.commit()
        except SQLAlchemyError as exc:
            await self._db.rollback()
            raise PersistenceError(str(exc), message="Error during profile delete") from exc
