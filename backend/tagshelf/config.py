"""
Tagshelf - Configuration
"""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings
from pydantic import Field


# Color of folders created without one
DEFAULT_FOLDER_COLOR = "ff9986b1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./tagshelf.db")

    # Folders
    default_folder_color: str = Field(default=DEFAULT_FOLDER_COLOR)
    # Insert the demo folder tree on startup when there are no folders yet
    seed_demo_data: bool = Field(default=False)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
