"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bignumber import BigNumber


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_rounding_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure BIGNUMBER_ROUNDING is unset for the test."""
    monkeypatch.delenv("BIGNUMBER_ROUNDING", raising=False)
    return monkeypatch


@pytest.fixture
def price() -> BigNumber:
    """A typical two-decimal price."""
    return BigNumber("1.50")
