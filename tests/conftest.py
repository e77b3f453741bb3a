"""Shared helpers and fixtures for the meeting scheduler test suite."""

from datetime import date, timedelta

import pytest

START = date(2025, 7, 7)  # a Monday


def day(n: int) -> date:
    """The n-th day counted from START."""
    return START + timedelta(days=n)


@pytest.fixture(params=["single-pass", "ac3"])
def propagation(request) -> str:
    """Run a test once per arc consistency mode."""
    return request.param
