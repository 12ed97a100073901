"""Logging setup for the command line checker.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys

from loguru import logger

from .settings import Settings


def setup_logger(settings: Settings) -> int:
    """Enable checker logs and send them to a stderr sink from settings.

    The package keeps its logs disabled until this is called.

    :return int: id of the added sink
    """
    logger.enable("password_checker")
    logger.remove()
    return logger.add(
        sys.stderr,
        level=settings.effective_log_level,
        format=settings.LOG_FORMAT,
        colorize=False,
    )
