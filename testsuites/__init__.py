"""
Test suites package.

    ui_testing/   Swag Labs Page Objects, fixtures and end-to-end scenarios
    unit/         Framework tests against an in-memory fake page (no browser)

Kept importable for IDE navigation and for `run_tests.py`.
"""
