"""Test configuration and fixtures."""

from datetime import datetime

import logfire
import pytest

# Keep telemetry local; create_app instruments FastAPI at import time
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def frozen_now() -> datetime:
    """Fixed point in time for audit stamps."""
    return datetime(2024, 6, 1, 12, 0, 0)
