"""Engine configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from FLEXVAL_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Spec loading
    UNKNOWN_RULE_POLICY: Literal["ignore", "reject"] = "ignore"

    # Pattern rule
    PATTERN_CACHE_SIZE: int = 256

    model_config = {"env_prefix": "FLEXVAL_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
