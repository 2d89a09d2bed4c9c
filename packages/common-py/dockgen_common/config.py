"""dockgen settings, read from DOCKGEN_* environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_NODE_VERSION,
    DEFAULT_PYTHON_VERSION,
    ENV_PREFIX,
    LOG_LEVELS,
)
from .errors import ValidationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    node_version: str = DEFAULT_NODE_VERSION
    python_version: str = DEFAULT_PYTHON_VERSION
    template_dir: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        normalized = v.strip().lower()
        if normalized == "warn":
            normalized = "warning"
        if normalized not in LOG_LEVELS:
            raise ValidationError(
                f"Invalid log level: '{v}'. Supported levels: {', '.join(LOG_LEVELS)}"
            )
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
