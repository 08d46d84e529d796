"""
Repository-level pytest configuration.

Makes the repository root importable for `e2e_tools` and `testsuites` and
exposes its path to tests. Suite options and markers live in
testsuites/conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).resolve().parent
