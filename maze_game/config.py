"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_game.core.maze_generator import SMALLEST_SIDE

# Package directory (maze_game/)
BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR.parent, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Text Maze"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Maze dimensions (applied to both loading and generation)
    min_size: int = 5
    max_size: int = 100

    # Generation
    exit_attempts: int = 100
    seed: Optional[int] = None

    # Loading
    require_reachable: bool = True
    mazes_dir: Path = BASE_DIR / "mazes"

    # Sessions kept in memory by the HTTP API
    max_sessions: int = 1000

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    @field_validator("min_size", "max_size")
    @classmethod
    def validate_size(cls, v: int) -> int:
        """Reject sizes too small to hold a start and an exit."""
        if v < SMALLEST_SIDE:
            raise ValueError(f"maze sizes must be at least {SMALLEST_SIDE}")
        return v

    @field_validator("exit_attempts")
    @classmethod
    def validate_exit_attempts(cls, v: int) -> int:
        if v < 0:
            raise ValueError("exit_attempts must not be negative")
        return v

    @field_validator("max_sessions")
    @classmethod
    def validate_max_sessions(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_sessions must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_size_range(self) -> "Settings":
        if self.min_size > self.max_size:
            raise ValueError("min_size must not be greater than max_size")
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
