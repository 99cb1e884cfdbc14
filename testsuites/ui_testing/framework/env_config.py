"""
================================================================================
Environment Configuration
================================================================================

Test data and expected UI text resolved from environment variables.

Every accessor re-reads the environment on each call, so a run can be
redirected (another user, another deployment) by exporting variables or by
dropping a `.env` file next to the project. Empty values count as unset.

Timeouts are integers in milliseconds, read from the leading digits ("12.5"
gives 12). Values without leading digits, or non-positive ones, fall back to
the default instead of raising.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict

from dotenv import load_dotenv

# Never overrides variables already exported in the process
load_dotenv(override=False)


SECRET_MASK = "***MASKED***"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DEFAULTS: Dict[str, Any] = {
    # Credentials
    "VALID_USERNAME": "standard_user",
    "VALID_PASSWORD": "secret_sauce",
    "INVALID_USERNAME": "invalid_user",
    "INVALID_PASSWORD": "wrong_password",
    "LOCKED_USER_USERNAME": "locked_out_user",
    "LOCKED_USER_PASSWORD": "secret_sauce",
    # URLs
    "BASE_URL": "https://www.saucedemo.com/",
    # Expected UI text
    "LOGIN_PAGE_TITLE": "Swag Labs",
    "PRODUCTS_PAGE_TITLE": "Products",
    "ERROR_MESSAGE": "Epic sadface: Username and password do not match any user in this service",
    "LOCKED_USER_ERROR": "Epic sadface: Sorry, this user has been locked out.",
    # Timeouts (ms)
    "ELEMENT_WAIT_TIMEOUT": 5000,
    "NAVIGATION_TIMEOUT": 10000,
}


def _get_str(name: str) -> str:
    return os.environ.get(name) or DEFAULTS[name]


def _get_int(name: str) -> int:
    # Leading integer wins ("12.5" -> 12, "5s" -> 5); non-positive falls back
    match = _LEADING_INT.match(os.environ.get(name) or "")
    if not match:
        return DEFAULTS[name]
    value = int(match.group(1))
    return value if value > 0 else DEFAULTS[name]


# =============================================================================
# Credentials
# =============================================================================

def get_valid_username() -> str:
    return _get_str("VALID_USERNAME")


def get_valid_password() -> str:
    return _get_str("VALID_PASSWORD")


def get_invalid_username() -> str:
    return _get_str("INVALID_USERNAME")


def get_invalid_password() -> str:
    return _get_str("INVALID_PASSWORD")


def get_locked_username() -> str:
    return _get_str("LOCKED_USER_USERNAME")


def get_locked_password() -> str:
    return _get_str("LOCKED_USER_PASSWORD")


# =============================================================================
# URLs and expected text
# =============================================================================

def get_base_url() -> str:
    return _get_str("BASE_URL")


def get_login_page_title() -> str:
    return _get_str("LOGIN_PAGE_TITLE")


def get_products_page_title() -> str:
    return _get_str("PRODUCTS_PAGE_TITLE")


def get_error_message() -> str:
    return _get_str("ERROR_MESSAGE")


def get_locked_user_error() -> str:
    return _get_str("LOCKED_USER_ERROR")


# =============================================================================
# Timeouts
# =============================================================================

def get_element_wait_timeout() -> int:
    """Element visibility wait bound in milliseconds."""
    return _get_int("ELEMENT_WAIT_TIMEOUT")


def get_navigation_timeout() -> int:
    """Navigation / URL wait bound in milliseconds."""
    return _get_int("NAVIGATION_TIMEOUT")


def get_all_config(mask_secrets: bool = False) -> Dict[str, Any]:
    """
    Return every resolved setting in one mapping.

    Intended for diagnostic dumps at the start of a run. Values are resolved
    fresh, so the result reflects the environment at call time.

    Args:
        mask_secrets: Replace password values with a fixed mask
    """
    config = {
        "valid_username": get_valid_username(),
        "valid_password": get_valid_password(),
        "invalid_username": get_invalid_username(),
        "invalid_password": get_invalid_password(),
        "locked_username": get_locked_username(),
        "locked_password": get_locked_password(),
        "base_url": get_base_url(),
        "login_page_title": get_login_page_title(),
        "products_page_title": get_products_page_title(),
        "error_message": get_error_message(),
        "locked_user_error": get_locked_user_error(),
        "element_wait_timeout": get_element_wait_timeout(),
        "navigation_timeout": get_navigation_timeout(),
    }
    if mask_secrets:
        for key in config:
            if key.endswith("_password"):
                config[key] = SECRET_MASK
    return config


__all__ = [
    "DEFAULTS",
    "get_valid_username",
    "get_valid_password",
    "get_invalid_username",
    "get_invalid_password",
    "get_locked_username",
    "get_locked_password",
    "get_base_url",
    "get_login_page_title",
    "get_products_page_title",
    "get_error_message",
    "get_locked_user_error",
    "get_element_wait_timeout",
    "get_navigation_timeout",
    "get_all_config",
]
