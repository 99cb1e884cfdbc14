"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the SauceDemo screens.

Each page class encapsulates:
    - Element locators
    - Page-specific actions and composite flows
    - Verification methods

Page objects hold a `BasePage` for their browser primitives.

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage

__all__ = [
    "LoginPage",
    "DashboardPage",
]
