"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    visbase_log_level: str = "info"

    # Group nesting levels accepted by builders and bounding-box traversal
    visbase_max_group_depth: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
