"""Application configuration using Pydantic BaseSettings."""

import logging
import os
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("mapgate.config")


def _is_production() -> bool:
    return os.getenv("MAPGATE_ENVIRONMENT") == "production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Request authorizer
    AUTHORIZER_HASH: Optional[str] = Field(default=None, validate_default=True)

    # Map gating
    VALIDATE_MAPS: bool = True
    MAP_CONFIG_PATH: Optional[str] = None
    MAX_CHAIN_DEPTH: int = 64

    # Logging
    EXTRA_LOGGING: bool = False
    LOG_LEVEL: str = "INFO"

    # Application Metadata
    APP_VERSION: str = "1.0.0"

    @field_validator("AUTHORIZER_HASH", mode="before")
    @classmethod
    def validate_authorizer_hash(cls, v):
        """Require AUTHORIZER_HASH in production; elsewhere leave privilege disabled."""
        if v is None or v == "":
            if _is_production():
                raise ValueError(
                    "AUTHORIZER_HASH must be set in production. "
                    "Privileged requests cannot be recognised without it."
                )
            logger.warning(
                "AUTHORIZER_HASH not set! Privileged requests are disabled. "
                "Set AUTHORIZER_HASH environment variable to enable them."
            )
            return None
        return v

    @field_validator("MAX_CHAIN_DEPTH")
    @classmethod
    def validate_max_chain_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_CHAIN_DEPTH must be at least 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level


# Global settings instance
settings = Settings()
