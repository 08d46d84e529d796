"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and command-line options and initializes logging.

================================================================================
"""

import pytest

from e2e_tools.common import init_logger


def pytest_addoption(parser):
    """Browser selection options for the UI suite."""
    group = parser.getgroup("ui", "Swag Labs UI suite")
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        choices=["chromium", "firefox", "webkit"],
        help="Browser for UI tests (default: browser.type from config)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser in headed mode (visible)",
    )


def pytest_configure(config):
    """Configure logging and project-wide custom markers."""
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and known limitations"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line("markers", "smoke: Quick verification tests")
    config.addinivalue_line("markers", "regression: Full regression test suite")
    config.addinivalue_line("markers", "e2e: End-to-end tests simulating user flows")
    config.addinivalue_line("markers", "ui: Browser-driven tests")
    config.addinivalue_line("markers", "unit: Framework tests against fakes, no browser")

    # Feature markers
    config.addinivalue_line("markers", "auth: Login and logout")
    config.addinivalue_line("markers", "inventory: Product listing and details")
    config.addinivalue_line("markers", "checkout: Cart and checkout flow")
    config.addinivalue_line("markers", "navigation: Routing and invalid pages")

    # Setup markers
    config.addinivalue_line(
        "markers", "authenticated: Start the browser session from the saved login state"
    )


def pytest_collection_modifyitems(config, items):
    """Tag tests with their suite marker based on location."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    return [
        "",
        "=" * 60,
        "Swag Labs End-to-End UI Suite",
        "=" * 60,
        "",
    ]
