"""
Pytest Configuration and Shared Fixtures

Global fixtures for the exampledata test suite.
"""

import numpy as np
import pytest

from exampledata.generator import generate_dataset
from exampledata.schema import empty_frame


@pytest.fixture
def rng():
    """Seeded random source so assertions on values are repeatable."""
    return np.random.default_rng(42)


@pytest.fixture
def example_df(rng):
    """Reference-size dataset of 100 records."""
    return generate_dataset(100, rng=rng)


@pytest.fixture
def small_df():
    return generate_dataset(5, rng=7)


@pytest.fixture
def empty_df():
    return empty_frame()
