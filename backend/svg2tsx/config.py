"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2tsx_env: str = "development"
    svg2tsx_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:1420", "http://localhost:3000"]

    # Seeds the options store
    default_component_name: str = "Icon"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
