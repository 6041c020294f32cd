"""FastAPI dependency injection."""

from __future__ import annotations

from transform_panels.config import settings


def get_settings():
    return settings
