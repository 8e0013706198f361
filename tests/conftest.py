"""Shared fixtures for the epiweek test suite."""

from datetime import date, timedelta

import pandas as pd
import pytest
from loguru import logger


@pytest.fixture
def daily_rain():
    """Two epi weeks of daily rainfall: 2016-W52 (1 mm/day) and 2017-W01 (2 mm/day)."""
    start = date(2016, 12, 26)
    days = [start + timedelta(days=i) for i in range(14)]
    return pd.DataFrame({
        "date": pd.to_datetime(days),
        "rain": [1.0] * 7 + [2.0] * 7,
    })


@pytest.fixture
def log_messages():
    """Capture epiweek debug logs, which are disabled by default."""
    messages = []
    logger.enable("epiweek")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("epiweek")
