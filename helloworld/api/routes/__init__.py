from fastapi import APIRouter

from helloworld.api.routes.assets import router as assets_router
from helloworld.api.routes.health import router as health_router
from helloworld.api.routes.page import router as page_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(page_router)
api_router.include_router(assets_router)
