"""
================================================================================
E2E Tools
================================================================================

Support utilities shared by the Swag Labs UI test suites.

Modules:
    - common: Configuration loading and Loguru logging setup
    - report_tools: Allure attachment helpers and report generation

Example:
    from e2e_tools.common import ConfigLoader, init_logger
    from e2e_tools.report_tools.allure_utils import attach_png

    init_logger()
    base_url = ConfigLoader().get("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
