"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    kumiko_env: str = "development"
    kumiko_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Defaults for entry points (the engine has its own)
    default_size: int = 800

    # PNG export: square render at raster_width, then a centered crop
    raster_width: int = 1200
    raster_height: int = 630
    raster_dpi: int = 150

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
