"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per manager
    - Context isolation so every test gets fresh cookies and storage
    - Browser type and headless mode from configuration

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from e2e_tools.common import as_bool, get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            context = await manager.new_context()
            page = await context.new_page()
            await page.goto("https://example.com")
    """

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode. Defaults to ``ui.headless``.
            browser_type: 'chromium', 'firefox' or 'webkit'. Defaults to ``ui.browser``.
        """
        if headless is None:
            headless = as_bool(get_config("ui.headless", True))
        if browser_type is None:
            browser_type = get_config("ui.browser", "chromium")
        if browser_type not in SUPPORTED_BROWSERS:
            logger.warning(f"Unknown browser '{browser_type}', falling back to chromium")
            browser_type = "chromium"

        self.headless = headless
        self.browser_type = browser_type

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)
        try:
            self._browser = await browser_launcher.launch(headless=self.headless)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser. Safe to call more than once."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
            logger.debug("Browser closed")

    async def new_context(
        self,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)

        return context

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
