"""
Repository-level pytest configuration.

Why this exists:
  - Register the browser command-line options early enough for every suite
  - Load an optional `.env` so local overrides apply to the whole run
  - Keep behavior explicit and discoverable

Test data defaults point at the public SauceDemo site. Override any of them
through environment variables or a local `.env` (see `.env.example`).
"""

from __future__ import annotations

from dotenv import load_dotenv

from testsuites.ui_testing.framework.browser_manager import SUPPORTED_BROWSERS

pytest_plugins = ["pytester"]

load_dotenv(override=False)


def pytest_addoption(parser):
    """Browser selection for the UI suite."""
    group = parser.getgroup("ui", "SauceDemo UI suite")
    group.addoption(
        "--browser",
        action="store",
        default="chromium",
        choices=SUPPORTED_BROWSERS,
        help="Browser for UI tests (default: chromium)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )

