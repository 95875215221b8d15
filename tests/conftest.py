"""Pytest configuration and fixtures for Datesense tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datesense can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datesense import CalendarDateTime, fixed_clock  # noqa: E402


@pytest.fixture
def frozen_clock():
    """A clock pinned to 2024-12-16 09:30:15.250."""
    return fixed_clock(CalendarDateTime(2024, 12, 16, 9, 30, 15, 250))
