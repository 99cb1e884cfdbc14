"""
Fixtures for offline tests: a Playwright page stand-in and a clean environment.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework.env_config import DEFAULTS


def _make_locator(selector: str) -> MagicMock:
    locator = MagicMock(name=f"locator({selector})")
    locator.fill = AsyncMock()
    locator.click = AsyncMock()
    locator.text_content = AsyncMock(return_value="")
    locator.is_visible = AsyncMock(return_value=True)
    locator.wait_for = AsyncMock()
    locator.count = AsyncMock(return_value=0)
    locator.first = locator
    return locator


def make_fake_page(url: str = "https://www.saucedemo.com/") -> MagicMock:
    """
    Build a MagicMock shaped like an async Playwright Page.

    `page.locator(selector)` returns the same locator mock for the same
    selector, so tests can configure it before the page object uses it.
    """
    page = MagicMock(name="page")
    locators = {}

    def _locator(selector):
        if selector not in locators:
            locators[selector] = _make_locator(selector)
        return locators[selector]

    page.locator.side_effect = _locator
    page.locators = locators
    page.url = url
    page.goto = AsyncMock()
    page.reload = AsyncMock()
    page.go_back = AsyncMock()
    page.title = AsyncMock(return_value="Swag Labs")
    page.wait_for_url = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.screenshot = AsyncMock(return_value=b"\x89PNG")
    page.keyboard.press = AsyncMock()
    page.close = AsyncMock()
    return page


@pytest.fixture
def fake_page() -> MagicMock:
    return make_fake_page()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every test-data variable so defaults apply."""
    for name in DEFAULTS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
