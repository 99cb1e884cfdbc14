"""
================================================================================
Dashboard Page Object (Async / Playwright)
================================================================================

SauceDemo inventory page shown after a successful login.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Page

from testsuites.ui_testing.framework import env_config
from testsuites.ui_testing.framework import step_logger as log
from testsuites.ui_testing.framework.page_base import (
    BasePage,
    PageActionError,
    PageVerificationError,
)


class DashboardPage:
    """Inventory (dashboard) page object (async)."""

    TITLE = ".title"
    INVENTORY_ITEM = ".inventory_item"

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.page_title = page.locator(self.TITLE)
        self.inventory_items = page.locator(self.INVENTORY_ITEM)

    async def get_title_text(self) -> str:
        return (await self.base.get_text(self.page_title)).strip()

    @allure.step("Verify products title")
    async def verify_products_title(self) -> str:
        """
        Check the inventory title is visible and reads as expected.

        Returns:
            The title text

        Raises:
            PageTimeoutError: If the title never becomes visible
            PageVerificationError: If the title is hidden or its text differs
        """
        expected = env_config.get_products_page_title()
        await self.base.wait_for_element(self.page_title)
        if not await self.base.is_element_visible(self.page_title):
            raise PageVerificationError(
                f"Inventory title is not visible (expected '{expected}')"
            )

        actual = await self.get_title_text()
        if actual != expected:
            raise PageVerificationError(
                f"Inventory title mismatch: expected '{expected}', got '{actual}'"
            )
        log.success(f"Inventory title verified: {actual}")
        return actual

    async def get_inventory_item_count(self) -> int:
        try:
            return await self.inventory_items.count()
        except Exception as e:
            raise PageActionError(f"Failed to count inventory items: {e}") from e

    @allure.step("Wait for inventory items to load")
    async def wait_for_inventory_items_to_load(self) -> None:
        """
        Wait until at least one inventory item is visible.

        Raises:
            PageTimeoutError: If no item shows up within ELEMENT_WAIT_TIMEOUT
        """
        await self.base.wait_for_element(
            self.inventory_items.first, env_config.get_element_wait_timeout()
        )
        log.debug("Inventory items loaded")
