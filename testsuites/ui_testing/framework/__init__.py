"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the SauceDemo suite.

Components:
    - env_config: Test data and expected UI text from environment variables
    - step_logger: Timestamped, colorized step and banner logging
    - page_base: Error-wrapped browser primitives used by page objects
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .page_base import (
    BasePage,
    PageActionError,
    PageTimeoutError,
    PageVerificationError,
)
from .browser_manager import BrowserManager

__all__ = [
    "BasePage",
    "PageActionError",
    "PageTimeoutError",
    "PageVerificationError",
    "BrowserManager",
]
