"""
Unit test fixtures: page objects over an in-memory fake page, no browser.
"""

import pytest

from e2e_tools.common import ConfigLoader
from testsuites.ui_testing.framework import BrowserSession
from testsuites.unit.fakes import FakePage, make_session


@pytest.fixture
def session() -> BrowserSession:
    return make_session()


@pytest.fixture
def fake_page(session: BrowserSession) -> FakePage:
    return session.page


@pytest.fixture
def fresh_config():
    """Drop the shared ConfigLoader before and after the test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
