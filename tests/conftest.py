"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture
def batch_passwords() -> list[str]:
    """Passwords where every entry fails a different rule."""
    return ["abc", "ABC", "Hello!", "aaabbb", "Hello1"]


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages of DEBUG level and above."""
    messages: list[str] = []
    logger.enable("password_checker")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop checker settings from environment."""
    for name in ("DEBUG", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def disabled_checker_logs() -> Iterator[None]:
    """Keep checker logs disabled as a library import leaves them."""
    logger.disable("password_checker")
    yield
    logger.disable("password_checker")
