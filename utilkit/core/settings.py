import logging
import os
from typing import Optional

from pydantic import BaseModel


def _flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default) not in ("0", "false", "False")


class Settings(BaseModel):
    # Logging
    LOG_LEVEL: str = os.getenv("UTILKIT_LOG_LEVEL", "INFO")
    LOG_TIME: bool = _flag("UTILKIT_LOG_TIME")
    LOG_FILENAME: bool = _flag("UTILKIT_LOG_FILENAME")

    # HTTP
    FETCH_TIMEOUT: float = float(os.getenv("UTILKIT_FETCH_TIMEOUT", "10.0"))
    FETCH_PROXY: Optional[str] = os.getenv("UTILKIT_FETCH_PROXY") or None

    # Images
    IMAGE_QUALITY: float = float(os.getenv("UTILKIT_IMAGE_QUALITY", "0.92"))

    @property
    def log_level(self) -> int:
        """Return the numeric logging level, falling back to ``INFO``."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
