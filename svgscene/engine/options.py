"""Resolver options — per-call knobs on top of the process settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from svgscene.config import settings


@dataclass
class ResolveOptions:
    """Controls how a generic tree is resolved into a scene document."""

    # Reported on the scene root
    dpi: float = field(default_factory=lambda: settings.dpi)

    # Base directory for relative image paths (None = keep them relative)
    resources_dir: Path | None = None

    # Font used when text carries no font attributes
    font_family: str = field(default_factory=lambda: settings.default_font_family)
    font_size: float = field(default_factory=lambda: settings.default_font_size)
