"""API v1 router."""

from fastapi import APIRouter

from cluster_profiles.api.v1.profiles import router as profiles_router

router = APIRouter()

router.include_router(profiles_router, tags=["profiles"])
