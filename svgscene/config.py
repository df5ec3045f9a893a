"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgscene_env: str = "development"
    svgscene_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Resolution used for absolute units and reported on the scene root
    dpi: float = 96.0

    # Float fields closer than this to their default are not serialized
    float_epsilon: float = 1e-6

    # Font used when a text element carries no font attributes
    default_font_family: str = "sans-serif"
    default_font_size: float = 12.0

    # Column width of base64 payloads in serialized data URIs
    base64_line_width: int = 64

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
