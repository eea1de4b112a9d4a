"""Shared pytest fixtures for receiptline tests."""

from __future__ import annotations

from datetime import datetime

import pytest

FIXED_NOW = datetime(2026, 3, 14, 9, 30, 0)

ROBINSON_LINES = [
    "Robinson Malls",
    "Caloocan City",
    "Manager",
    "Jane Doe",
    "Cashier",
    "#5",
    "Name",
    "Qty",
    "Price",
    "Ginger Tea",
    "1",
    "9.20",
    "Sub Total",
    "107.60",
    "Cash",
    "200.00",
    "Change",
    "92.40",
]


@pytest.fixture
def robinson_lines() -> list[str]:
    return list(ROBINSON_LINES)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
