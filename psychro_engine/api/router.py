"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from psychro_engine.api.state_point import router as state_point_router
from psychro_engine.api.process import router as process_router

router = APIRouter()
router.include_router(state_point_router)
router.include_router(process_router)
