from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    log_level: str = "WARNING"

    # Replaces any container already visited during safe_stringify
    circular_marker: str = "[Circular]"
    stringify_indent: Optional[int] = None
    stringify_ensure_ascii: bool = False

    class Config:
        env_prefix = "OBJTREE_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
