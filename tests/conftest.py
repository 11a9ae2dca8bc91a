"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cameraman.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        CMAN_PROFILE="",
        CMAN_ANGLE_BUFFER_MAX=1024,
        CMAN_AUTO_SKIP=False,
        CMAN_AUTO_EXIT=False,
        CMAN_VIDDUMP="",
        TICRATE=35,
        LOG_LEVEL="INFO",
    )
    yield
    settings._wrapped = None
