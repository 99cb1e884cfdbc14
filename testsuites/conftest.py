"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, tags tests by directory and writes Allure run
metadata at the end of a session.

================================================================================
"""

import pytest

from autotest_tools.report_tools.allure_utils import write_run_metadata
from testsuites.ui_testing.framework import env_config


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests against the live site"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "login: Tests related to the login screen"
    )
    config.addinivalue_line(
        "markers", "navigation: Tests related to moving between pages"
    )


def pytest_collection_modifyitems(config, items):
    """
    Auto-add domain markers based on where a test lives.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_sessionfinish(session, exitstatus):
    """Write environment/executor/categories files next to Allure results."""
    results_dir = session.config.getoption("allure_report_dir", None)
    if not results_dir:
        return
    # Only the controller writes metadata under xdist
    if hasattr(session.config, "workerinput"):
        return
    write_run_metadata(
        results_dir,
        browser=session.config.getoption("browser", "chromium"),
        base_url=env_config.get_base_url(),
    )


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "SauceDemo UI Automation Suite",
        f"Base URL: {env_config.get_base_url()}",
        "=" * 60,
        "",
    ]
