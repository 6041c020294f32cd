"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from transform_panels.models.values import StyleValue


class StyleRequest(BaseModel):
    style: dict[str, StyleValue] = Field(
        default_factory=dict,
        description="Current style as value trees, keyed by property",
    )
    css: dict[str, str] = Field(
        default_factory=dict,
        description="Extra properties as CSS text; parsed and layered over `style`",
    )


class AxisUpdateRequest(StyleRequest):
    index: int = Field(..., ge=0, description="Axis (0=x, 1=y, 2=z) or member position in the panel")
    value: StyleValue = Field(..., description="Replacement unit (translate/scale) or function (rotate/skew)")
