"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

SauceDemo login screen.

Design goals:
  - Primitive actions (enter username/password, submit, read error)
  - Composite login flows for the three account kinds the suite covers
    (standard, invalid, locked out), each logging its own steps
  - Expected values proxied from env_config so scenarios never read the
    environment themselves

================================================================================
"""

from __future__ import annotations

import re

import allure
from playwright.async_api import Page

from testsuites.ui_testing.framework import env_config
from testsuites.ui_testing.framework import step_logger as log
from testsuites.ui_testing.framework.page_base import BasePage


INVENTORY_URL_PATTERN = re.compile(r".*inventory.html")


class LoginPage:
    """Login page object (async)."""

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = 'h3[data-test="error"]'

    def __init__(self, page: Page):
        self.page = page
        self.base = BasePage(page)
        self.username_input = page.locator(self.USERNAME_INPUT)
        self.password_input = page.locator(self.PASSWORD_INPUT)
        self.submit_button = page.locator(self.LOGIN_BUTTON)
        self.error_message = page.locator(self.ERROR_MESSAGE)

    # =========================================================================
    # Primitive Actions
    # =========================================================================

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the configured base URL."""
        await self.base.navigate_to(env_config.get_base_url())
        return self

    @allure.step("Enter username: {username}")
    async def enter_username(self, username: str) -> None:
        await self.base.fill_text(self.username_input, username)

    @allure.step("Enter password")
    async def enter_password(self, password: str) -> None:
        await self.base.fill_text(self.password_input, password)

    @allure.step("Submit login form")
    async def submit(self) -> None:
        await self.base.click_element(self.submit_button)

    async def get_error(self) -> str:
        """Return the text of the login error banner."""
        return await self.base.get_text(self.error_message)

    async def is_error_displayed(self) -> bool:
        return await self.base.is_element_visible(self.error_message)

    async def get_title(self) -> str:
        return await self.base.get_page_title()

    def get_current_url(self) -> str:
        return self.base.get_current_url()

    @allure.step("Go back")
    async def go_back(self) -> None:
        await self.base.go_back()

    # =========================================================================
    # Composite Flows
    # =========================================================================

    async def _submit_credentials(self, username: str, password: str) -> None:
        log.step(1, f"Enter username '{username}'")
        await self.enter_username(username)
        log.step(2, "Enter password")
        await self.enter_password(password)
        log.step(3, "Submit login form")
        await self.submit()

    @allure.step("Login with valid credentials")
    async def login_with_valid_credentials(self) -> None:
        """
        Log in as the standard user and wait for the inventory page.

        Raises:
            PageTimeoutError: If the URL never reaches inventory.html
        """
        log.info("Logging in with valid credentials")
        try:
            await self._submit_credentials(
                env_config.get_valid_username(), env_config.get_valid_password()
            )
            log.step(4, "Wait for inventory page")
            await self.base.wait_for_url(
                INVENTORY_URL_PATTERN, env_config.get_navigation_timeout()
            )
        except Exception as e:
            log.error(f"Valid login failed: {e}")
            raise
        log.success("Logged in, inventory page reached")

    @allure.step("Login with invalid credentials")
    async def login_with_invalid_credentials(self) -> None:
        """
        Submit unknown credentials and wait for the error banner.

        Raises:
            PageTimeoutError: If no error banner appears
        """
        log.info("Logging in with invalid credentials")
        try:
            await self._submit_credentials(
                env_config.get_invalid_username(), env_config.get_invalid_password()
            )
            log.step(4, "Wait for login error")
            await self.base.wait_for_element(
                self.error_message, env_config.get_element_wait_timeout()
            )
        except Exception as e:
            log.error(f"Invalid-credentials login flow failed: {e}")
            raise
        log.success("Login error displayed")

    @allure.step("Login with locked out user")
    async def login_with_locked_user(self) -> None:
        """
        Submit the locked-out account and wait for the lockout banner.

        Raises:
            PageTimeoutError: If no error banner appears
        """
        log.info("Logging in with locked out user")
        try:
            await self._submit_credentials(
                env_config.get_locked_username(), env_config.get_locked_password()
            )
            log.step(4, "Wait for lockout error")
            await self.base.wait_for_element(
                self.error_message, env_config.get_element_wait_timeout()
            )
        except Exception as e:
            log.error(f"Locked-user login flow failed: {e}")
            raise
        log.success("Lockout error displayed")

    # =========================================================================
    # Expected Values
    # =========================================================================

    def get_login_page_title(self) -> str:
        return env_config.get_login_page_title()

    def get_products_page_title(self) -> str:
        return env_config.get_products_page_title()

    def get_expected_error_message(self) -> str:
        return env_config.get_error_message()

    def get_expected_locked_user_error(self) -> str:
        return env_config.get_locked_user_error()

    def get_valid_username(self) -> str:
        return env_config.get_valid_username()

    def get_valid_password(self) -> str:
        return env_config.get_valid_password()

    def get_invalid_username(self) -> str:
        return env_config.get_invalid_username()

    def get_invalid_password(self) -> str:
        return env_config.get_invalid_password()

    def get_locked_username(self) -> str:
        return env_config.get_locked_username()

    def get_locked_password(self) -> str:
        return env_config.get_locked_password()

    def get_base_url(self) -> str:
        return env_config.get_base_url()
