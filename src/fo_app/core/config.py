# src/fo_app/core/config.py
from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    App settings (12-factor). Override via env vars, e.g.
      FO_LOG_LEVEL=DEBUG  FO_MAX_WORKERS=4  FO_PARALLEL_DEFAULT=false
    """

    # App
    LOG_LEVEL: str = "INFO"

    # Organizing
    PARALLEL_DEFAULT: bool = True
    MAX_WORKERS: int | None = Field(default=None, ge=1, le=64)
    DRY_RUN_DEFAULT: bool = True

    model_config = SettingsConfigDict(
        env_prefix="FO_",
        env_file=".env",
        extra="ignore",
    )

    def worker_count(self) -> int:
        if self.MAX_WORKERS:
            return self.MAX_WORKERS
        ncpu = os.cpu_count() or 4
        return max(4, min(16, ncpu * 2))  # I/O-bound heuristic


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    FastAPI-friendly cached getter. Use Depends(get_settings) where needed.
    """
    return Settings()
