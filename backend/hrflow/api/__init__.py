"""HTTP API for the workflow engine.

Routes are grouped by API version; the application mounts ``router``
under ``settings.API_V1_PREFIX``.
"""

from fastapi import APIRouter

from hrflow.api.v1 import router as v1_router

router = APIRouter()

router.include_router(v1_router, tags=["v1"])

__all__ = ["router"]
