"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from serialedit import Entry


@pytest.fixture
def sample_text() -> str:
    """Serialized array of two entries."""
    return 'a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}'


@pytest.fixture
def abc_entries() -> list[Entry]:
    """Three sequential single-character entries."""
    return [Entry(key=0, value="a"), Entry(key=1, value="b"), Entry(key=2, value="c")]
