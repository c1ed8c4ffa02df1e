"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Locators and interaction steps for the shop login screen.

Locators are bound once in ``__init__`` and re-resolved by Playwright on every
use, so a single instance can be reused across repeated login attempts on the
same page.

Every action propagates Playwright errors and ``expect`` assertion failures
to the caller, except the welcome popup cleanup, which is best-effort.

================================================================================
"""

from __future__ import annotations

from loguru import logger
from playwright.async_api import Page, expect

from e2e_tools.constants.timeouts import ERROR_MESSAGES, TIMEOUTS
from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.login_tab = page.get_by_role("tab", name="Log in")
        self.email_input = page.get_by_role("textbox", name="Email")
        self.password_input = page.get_by_role("textbox", name="Password")
        self.login_button = page.get_by_role("button", name="Log in")
        self.error_message = page.get_by_text(ERROR_MESSAGES.INVALID_LOGIN)
        self.start_shopping_button = page.get_by_role(
            "button", name="Start Shopping", exact=True
        )

    async def navigate_to_login(self) -> None:
        """Navigate to the login route and wait for the load event."""
        await self.navigate()

    async def dismiss_welcome_popup_if_present(self) -> None:
        """
        Close the welcome popup if it is currently shown.

        Whether the popup appears depends on the environment, so any failure
        here is logged and ignored instead of failing the test.
        """
        try:
            if await self.start_shopping_button.is_visible():
                await self.start_shopping_button.click()
                await expect(self.start_shopping_button).to_be_hidden(
                    timeout=TIMEOUTS.MEDIUM
                )
                logger.debug("Welcome popup dismissed")
        except Exception as e:
            logger.warning("Welcome popup handling failed: {error}", error=str(e))

    async def login(self, email: str, password: str) -> None:
        """
        Perform login with provided credentials.

        Does not wait for anything after submitting; use the expect_* helpers
        or a page object for the landing page to verify the outcome.

        Args:
            email: User's email address
            password: User's password

        Raises:
            AssertionError: When a login element is not visible within its timeout
        """
        logger.info(f"Logging in as {email}")
        await self.navigate(wait_for="domcontentloaded")

        await self.dismiss_welcome_popup_if_present()

        await expect(self.login_tab).to_be_visible(timeout=TIMEOUTS.MEDIUM)
        await self.login_tab.click()
        await expect(self.email_input).to_be_visible(timeout=TIMEOUTS.MEDIUM)
        # Library default timeout, unlike the waits above.
        await expect(self.password_input).to_be_visible()
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.login_button.click()

    async def expect_error_visible(self) -> None:
        """
        Assert the invalid-login message is shown.

        Raises:
            AssertionError: When the message is not visible within TIMEOUTS.MEDIUM
        """
        await expect(self.error_message).to_be_visible(timeout=TIMEOUTS.MEDIUM)

    async def expect_still_on_login_page(self) -> None:
        """
        Assert the login form is still displayed after a rejected attempt.

        Raises:
            AssertionError: When the login tab or credential fields are not visible
        """
        await expect(self.login_tab).to_be_visible(timeout=TIMEOUTS.MEDIUM)
        await expect(self.email_input).to_be_visible()
        await expect(self.password_input).to_be_visible()
