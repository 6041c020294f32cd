"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from transform_panels.config import Settings
from transform_panels.dependencies import get_settings
from transform_panels.models.responses import HealthResponse
from transform_panels.transforms.registry import all_panels

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.transform_panels_env,
        panels_registered=len(all_panels()),
    )
