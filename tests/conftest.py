from __future__ import annotations

from datetime import datetime, timezone

import pytest

from helium_logger import HeliumLogger, Log


@pytest.fixture(autouse=True)
def _reset_log():
    prev = Log.logger
    Log.reset()
    yield
    Log.set_logger(prev)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)


@pytest.fixture
def lines() -> list[str]:
    return []


@pytest.fixture
def helium(lines) -> HeliumLogger:
    return HeliumLogger(sink=lines.append)
