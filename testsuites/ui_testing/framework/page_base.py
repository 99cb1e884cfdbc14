"""
================================================================================
Base Page
================================================================================

Error-wrapped browser primitives shared by all page objects.

Page objects hold a `BasePage` (they do not inherit from it) and route every
browser interaction through it, so every driver failure surfaces with the same
shape:

    PageActionError("Failed to navigate to https://...: <driver message>")

Provides:
    - Navigation (goto, reload, back) and URL/title access
    - Element primitives (fill, click, text, visibility)
    - Bounded waits raising PageTimeoutError
    - Failure capture (screenshot + URL) for Allure

Nothing here retries. Callers decide whether to retry or abort.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Pattern, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework import env_config


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

UrlPattern = Union[str, Pattern[str]]


class PageActionError(Exception):
    """Raised when a browser primitive fails; wraps the driver error."""
    pass


class PageTimeoutError(PageActionError):
    """Raised when a bounded wait expires."""

    def __init__(self, message: str, timeout_ms: int):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class PageVerificationError(PageActionError):
    """Raised when a page shows something other than what was expected."""
    pass


class BasePage:
    """
    Wrapper around a Playwright page exposing error-wrapped primitives.

    The page handle is supplied by the caller and never closed here.

    Usage:
        base = BasePage(page)
        await base.navigate_to("https://www.saucedemo.com/")
        await base.fill_text(page.locator("#user-name"), "standard_user")
    """

    def __init__(self, page: Page):
        """
        Args:
            page: Playwright Page object (owned by the fixture chain)
        """
        self.page = page
        # Last non-driver exception swallowed by is_element_visible()
        self.last_visibility_error: Optional[BaseException] = None

    def locator(self, selector: str) -> Locator:
        """Build a lazily-resolved locator for `selector`."""
        return self.page.locator(selector)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, url: str, wait_until: str = "networkidle") -> None:
        """
        Navigate to a URL and wait for the given load state.

        Raises:
            PageActionError: If navigation fails
        """
        with allure.step(f"Navigate to {url}"):
            try:
                await self.page.goto(
                    url,
                    wait_until=wait_until,
                    timeout=env_config.get_navigation_timeout(),
                )
            except Exception as e:
                raise PageActionError(f"Failed to navigate to {url}: {e}") from e
            logger.debug(f"Navigated to: {url}")

    async def reload_page(self) -> None:
        try:
            await self.page.reload()
        except Exception as e:
            raise PageActionError(f"Failed to reload page: {e}") from e

    async def go_back(self) -> None:
        try:
            await self.page.go_back()
        except Exception as e:
            raise PageActionError(f"Failed to go back: {e}") from e

    async def get_page_title(self) -> str:
        try:
            return await self.page.title()
        except Exception as e:
            raise PageActionError(f"Failed to get page title: {e}") from e

    def get_current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def fill_text(self, locator: Locator, text: str) -> None:
        try:
            await locator.fill(text)
        except Exception as e:
            raise PageActionError(f"Failed to fill text: {e}") from e

    async def click_element(self, locator: Locator) -> None:
        try:
            await locator.click()
        except Exception as e:
            raise PageActionError(f"Failed to click element: {e}") from e

    async def get_text(self, locator: Locator) -> str:
        """
        Get text content of an element.

        Returns:
            Text content, or an empty string when the element has none
        """
        try:
            return await locator.text_content() or ""
        except Exception as e:
            raise PageActionError(f"Failed to get text: {e}") from e

    async def is_element_visible(self, locator: Locator) -> bool:
        """
        Check if element is visible.

        Never raises. Driver errors (detached frame, closed page) are expected
        while a page is changing and are logged at debug level; anything else
        is logged as a warning and kept in `last_visibility_error`.

        Returns:
            True if visible, False otherwise
        """
        try:
            return await locator.is_visible()
        except PlaywrightError as e:
            logger.debug(f"Visibility check failed: {e}")
            return False
        except Exception as e:
            self.last_visibility_error = e
            logger.warning(f"Visibility check raised unexpected {type(e).__name__}: {e}")
            return False

    async def press_key(self, key: str) -> None:
        """Press a keyboard key (e.g. 'Enter', 'Escape')."""
        try:
            await self.page.keyboard.press(key)
        except Exception as e:
            raise PageActionError(f"Failed to press key {key}: {e}") from e

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_element(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for element to be visible.

        Args:
            locator: Element locator
            timeout: Timeout in milliseconds (defaults to ELEMENT_WAIT_TIMEOUT; 0 disables it)

        Raises:
            PageTimeoutError: If element doesn't become visible within timeout
            PageActionError: On any other driver failure
        """
        if timeout is None:
            timeout = env_config.get_element_wait_timeout()
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise PageTimeoutError(
                f"Element did not appear within {timeout}ms: {e}", timeout
            ) from e
        except Exception as e:
            raise PageActionError(f"Failed waiting for element: {e}") from e

    async def wait_for_navigation(self, timeout: Optional[int] = None) -> None:
        """
        Wait for the network to go idle after a navigation.

        Raises:
            PageTimeoutError: If the load state isn't reached within timeout
        """
        if timeout is None:
            timeout = env_config.get_navigation_timeout()
        try:
            await self.page.wait_for_load_state("networkidle", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise PageTimeoutError(
                f"Navigation timeout after {timeout}ms: {e}", timeout
            ) from e
        except Exception as e:
            raise PageActionError(f"Failed waiting for navigation: {e}") from e

    async def wait_for_url(
        self,
        url_pattern: UrlPattern,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: Glob string or compiled regex
            timeout: Timeout in milliseconds (defaults to NAVIGATION_TIMEOUT; 0 disables it)

        Raises:
            PageTimeoutError: If URL doesn't match within timeout
        """
        if timeout is None:
            timeout = env_config.get_navigation_timeout()
        pattern_text = getattr(url_pattern, "pattern", url_pattern)
        with allure.step(f"Wait for URL: {pattern_text}"):
            try:
                await self.page.wait_for_url(url_pattern, timeout=timeout)
            except PlaywrightTimeoutError as e:
                raise PageTimeoutError(
                    f"URL did not match {pattern_text} within {timeout}ms: {e}",
                    timeout,
                ) from e
            except Exception as e:
                raise PageActionError(f"Failed waiting for URL {pattern_text}: {e}") from e

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def capture_failure(self, test_name: str) -> Optional[Path]:
        """
        Capture debugging information on test failure.

        Saves a full-page screenshot under SCREENSHOT_DIR and attaches it,
        together with the current URL, to the Allure report.

        Returns:
            Path to the saved screenshot, or None if capture failed
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_name = re.sub(r"[^\w.-]", "_", test_name)
        filepath = SCREENSHOT_DIR / f"failure_{safe_name}_{timestamp}.png"

        with allure.step("Capture failure details"):
            try:
                screenshot = await self.page.screenshot(path=str(filepath), full_page=True)
            except Exception as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")
                return None

            allure.attach(
                screenshot,
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "PageActionError",
    "PageTimeoutError",
    "PageVerificationError",
    "SCREENSHOT_DIR",
]
