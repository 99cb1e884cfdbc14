"""
================================================================================
Autotest Tools
================================================================================

Shared infrastructure for the SauceDemo automation suite.

Modules:
    - common: Configuration loading (YAML + env overrides) and Loguru setup
    - report_tools: Allure run metadata, attachments and report generation

Example:
    from autotest_tools.common import get_config, init_logger
    from autotest_tools.report_tools.allure_utils import write_run_metadata

    init_logger()
    write_run_metadata(Path("reports/allure-results"), "chromium", base_url)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
