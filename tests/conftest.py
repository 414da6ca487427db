"""Shared fixtures for expressive tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def channel() -> Mock:
    """Provide a mock response channel whose set_status chains to itself."""

    mock = Mock(spec=["set_status", "write_body"])
    mock.set_status.return_value = mock
    return mock
