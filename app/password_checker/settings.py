"""Password Checker Settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os

from loguru import logger
from pydantic import BaseModel, field_validator

_DEFAULT_LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "{name}:{function} - <level>{message}</level>"
)


class Settings(BaseModel):
    """Settings of the command line checker, read from environment."""

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = _DEFAULT_LOG_FORMAT

    @field_validator("LOG_LEVEL", mode="before")
    def check_log_level(cls, level: str) -> str:  # noqa: N805
        """Normalize level name and make sure loguru knows it."""
        level = str(level).upper()
        logger.level(level)
        return level

    @property
    def effective_log_level(self) -> str:
        """Level to log with, DEBUG overrides LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
