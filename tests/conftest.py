"""Pytest configuration and shared fixtures for fincalc tests.

Provides debt fixtures, an isolated configuration that writes logs and
exports under ``tmp_path``, and float comparison helpers.
"""

from __future__ import annotations

import logging

import pytest

from fincalc.config import TestConfig
from fincalc.models.debt import Debt


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point FINCALC_DATA_DIR at a per-test folder so nothing lands in ./instance."""

    data_dir = tmp_path / "data"
    monkeypatch.setenv("FINCALC_DATA_DIR", str(data_dir))
    monkeypatch.setenv("FINCALC_DEV_MODE", "false")
    yield data_dir
    # Release rotating file handlers opened during the test.
    package_logger = logging.getLogger("fincalc")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def test_config(tmp_path) -> TestConfig:
    return TestConfig(data_dir=tmp_path / "config")


# =============================================================================
# Debt Fixtures
# =============================================================================


@pytest.fixture
def sample_debts() -> list[Debt]:
    """Credit card, student loan and car loan used across payoff tests."""

    return [
        Debt(name="Credit Card", balance=5000.00, annual_rate=18.99, minimum_payment=125.00),
        Debt(name="Student Loan", balance=15000.00, annual_rate=6.5, minimum_payment=180.00),
        Debt(name="Car Loan", balance=8000.00, annual_rate=4.2, minimum_payment=220.00),
    ]


@pytest.fixture
def debt_factory():
    """Factory building debts with sensible defaults."""

    def _create_debt(
        name: str = "Debt",
        balance: float = 1000.00,
        annual_rate: float = 12.0,
        minimum_payment: float = 50.00,
    ) -> Debt:
        return Debt(
            name=name,
            balance=balance,
            annual_rate=annual_rate,
            minimum_payment=minimum_payment,
        )

    return _create_debt


# =============================================================================
# Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Financial calculations on floats pick up small rounding differences;
    the default tolerance is one cent.
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
