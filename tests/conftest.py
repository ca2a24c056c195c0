"""Shared pytest fixtures for the full casecodec test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _detach_loguru_sinks() -> Iterator[None]:
    """Drop sinks added during a test so later tests never write to closed streams."""

    yield
    logger.remove()
