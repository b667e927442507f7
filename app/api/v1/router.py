from fastapi import APIRouter

from app.api.v1.endpoints import taskboard, health

router = APIRouter(prefix="/api/v1")

router.include_router(taskboard.router)
router.include_router(health.router)
