"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from transform_panels.models.values import StyleValue


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = ""
    panels_registered: int = 0


class StyleResponse(BaseModel):
    style: dict[str, StyleValue] = Field(default_factory=dict)
    css: dict[str, str] = Field(default_factory=dict)
    used: bool = False
    errors: dict[str, str] = Field(default_factory=dict)
