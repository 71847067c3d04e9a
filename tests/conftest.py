"""
Pytest configuration and shared fixtures for rjextensions tests.
"""

import numpy as np
import pytest
from loguru import logger


@pytest.fixture
def rng():
    """Seeded random generator for reproducible colors."""
    return np.random.default_rng(12345)


@pytest.fixture
def sample_normalized_colors():
    """
    Provide sample (r, g, b, a) normalized channel tuples.

    Returns:
        List of tuples with values in [0, 1]
    """
    return [
        (1.0, 0.0, 0.0, 1.0),  # Red
        (0.0, 1.0, 0.0, 1.0),  # Green
        (0.0, 0.0, 1.0, 0.5),  # Half transparent blue
        (0.1, 0.2, 0.3, 0.4),
        (0.3333333333333333, 0.6666666666666666, 0.0, 1.0),
        (0.0, 0.0, 0.0, 0.0),
    ]


@pytest.fixture
def log_records():
    """Capture loguru records as (level, message) tuples."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
