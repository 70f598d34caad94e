"""
Application configuration loaded from environment variables.
"""
from enum import Enum
from typing import List

from pydantic_settings import BaseSettings


class StorageBackend(str, Enum):
    MEMORY = "memory"
    DATABASE = "database"


class Settings(BaseSettings):
    # Storage
    storage_backend: StorageBackend = StorageBackend.MEMORY
    database_url: str = "sqlite+aiosqlite:///./zooco.db"

    # Day and time-slot bucketing happen in this zone
    timezone: str = "UTC"

    # Remote API (used by the client-side store)
    api_base_url: str = "http://localhost:5000/api"
    api_timeout_seconds: float = 10.0

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "ZOOCO_"
        extra = "ignore"


settings = Settings()
