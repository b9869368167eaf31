"""API router definitions."""

from fastapi import APIRouter

from .equipment import router as equipment_router
from .parameters import router as parameters_router

api_router = APIRouter()
api_router.include_router(equipment_router)
api_router.include_router(parameters_router)

__all__ = ["api_router"]
