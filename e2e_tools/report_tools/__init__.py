"""Allure reporting helpers."""

from .allure_utils import (
    AllureReportProcessor,
    attach_json,
    attach_page_screenshot,
    attach_png,
    attach_text,
    generate_allure_report,
)

__all__ = [
    "AllureReportProcessor",
    "attach_json",
    "attach_page_screenshot",
    "attach_png",
    "attach_text",
    "generate_allure_report",
]
