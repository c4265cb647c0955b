"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def standard_params():
    """Standard at-the-money option parameters."""
    return {
        "spot": 100.0,
        "strike": 100.0,
        "time": 1.0,
        "rate": 0.05,
        "sigma": 0.20,
    }


@pytest.fixture
def itm_call_params():
    """In-the-money call parameters."""
    return {
        "spot": 110.0,
        "strike": 100.0,
        "time": 1.0,
        "rate": 0.05,
        "sigma": 0.20,
    }


@pytest.fixture
def market_params(standard_params):
    """Standard parameters without the volatility, as seen by the solver."""
    return {key: value for key, value in standard_params.items() if key != "sigma"}
