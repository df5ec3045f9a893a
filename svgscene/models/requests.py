"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    svg: str = Field(..., description="Preprocessed SVG code")
    dpi: float | None = Field(
        default=None,
        gt=0,
        description="Resolution for absolute units (defaults to the configured DPI)",
    )


class RoundtripRequest(BaseModel):
    svg: str = Field(..., description="Preprocessed SVG code")
