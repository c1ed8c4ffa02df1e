"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Base URL resolution from configuration
    - Path-based navigation
    - Screenshot capture for debugging

Page objects built on this class only bind locators in ``__init__``;
nothing touches the browser until an action is awaited.

================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from loguru import logger
from playwright.async_api import Page

from e2e_tools.common import get_config


DEFAULT_BASE_URL = "http://localhost:3000"


class BasePage:
    """
    Base class for all page objects.

    Provides common functionality for:
        - Navigation and URL handling
        - Screenshot capture

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            def __init__(self, page: Page, base_url: str = ""):
                super().__init__(page, base_url)
                self.login_button = page.get_by_role("button", name="Log in")
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application. Defaults to ``ui.base_url``.
        """
        self.page = page
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        """Base URL without trailing slash, read from config when not given."""
        base_url = self._base_url or get_config("ui.base_url") or DEFAULT_BASE_URL
        return str(base_url).rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle', 'commit'
        """
        await self.navigate_to(self.URL_PATH, wait_for=wait_for)

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "load",
    ) -> None:
        """
        Navigate to specific path under the base URL.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}{path}"
        await self.page.goto(full_url, wait_until=wait_for)
        logger.debug(f"Navigated to: {full_url} (wait_until={wait_for})")

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
    ) -> Path:
        """
        Take screenshot into the configured screenshot directory.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = Path(get_config("ui.screenshot_dir", "reports/screenshots"))
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = screenshot_dir / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> bytes:
        """
        Save a full-page screenshot for a failed test.

        Returns:
            PNG bytes, for attaching to the test report
        """
        safe_name = re.sub(r"[^\w.-]", "_", test_name)
        filepath = await self.screenshot(f"failure_{safe_name}", full_page=True)
        return filepath.read_bytes()


__all__ = [
    "BasePage",
]
