"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ResolveResponse(BaseModel):
    document: dict[str, Any] = Field(default_factory=dict)
    defs_count: int = 0
    node_count: int = 0
    processing_time_ms: float = 0.0


class RoundtripResponse(BaseModel):
    svg: str
