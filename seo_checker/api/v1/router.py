from fastapi import APIRouter

from seo_checker.api.v1.analyze import router as analyze_router
from seo_checker.api.v1.priority import router as priority_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(analyze_router)
api_v1_router.include_router(priority_router)
