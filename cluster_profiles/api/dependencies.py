"""FastAPI dependencies shared by the API routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cluster_profiles.config import Settings, get_settings
from cluster_profiles.db.session import get_session_dependency
from cluster_profiles.managers.profile import ProfileManager

SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session_dependency)]


def get_profile_manager(session: SessionDep, settings: SettingsDep) -> ProfileManager:
    return ProfileManager(session, default_profile_name=settings.profiles.default_name)


ProfileManagerDep = Annotated[ProfileManager, Depends(get_profile_manager)]
