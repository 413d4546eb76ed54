"""API router aggregation.

Routes are mounted at the root: /health, /info, /login.
"""

from fastapi import APIRouter

from app.api.endpoints import auth, health, info

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(info.router, prefix="/info", tags=["info"])
api_router.include_router(auth.router, prefix="/login", tags=["auth"])
