"""Application configuration settings."""
import os
import json
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Shelf Sort Level Engine"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS settings - as comma-separated string or JSON array
    cors_origins: str = "http://localhost:8081,http://localhost:19006"

    # Game settings
    coins_per_match: int = Field(default=10, ge=0)
    level_complete_bonus: int = Field(default=10, ge=0)
    random_seed: Optional[int] = None
    max_sessions: int = Field(default=1000, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="SHELFSORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from string (comma-separated or JSON)."""
        if not self.cors_origins:
            return ["http://localhost:8081"]

        # Try JSON parse first
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
        except json.JSONDecodeError:
            pass

        # Fall back to comma-separated
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (re-read on every call in debug mode)."""
    global _settings
    if _settings is None or os.getenv("SHELFSORT_DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
