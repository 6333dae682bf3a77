"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hashavatar_env: str = "development"
    hashavatar_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Avatar defaults
    default_size: int = 100
    default_grid_size: int = 5
    default_symmetric: bool = True
    gravatar_base_url: str = "https://www.gravatar.com/avatar/"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
