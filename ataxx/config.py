from functools import lru_cache
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ataxx.ai.constants import DEFAULT_MINIMAX_DEPTH

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    search_depth: int = Field(default=DEFAULT_MINIMAX_DEPTH, ge=1)
    seed: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value


def load_settings() -> Settings:
    """Build settings from ATAXX_* environment variables (and .env)."""
    values = {
        "search_depth": os.getenv("ATAXX_SEARCH_DEPTH"),
        "seed": os.getenv("ATAXX_SEED"),
        "log_level": os.getenv("ATAXX_LOG_LEVEL"),
    }
    return Settings(**{key: value for key, value in values.items() if value not in (None, "")})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
