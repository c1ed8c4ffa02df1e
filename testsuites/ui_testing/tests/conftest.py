"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser, context and page lifecycle management
- A stub shop served through Playwright request routing, so the suites
  run without a deployed environment
- Page Object fixtures
- Screenshot attached to the pytest-html report on failure

================================================================================
"""

from __future__ import annotations

import base64
import html
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import AsyncGenerator, Dict
from urllib.parse import urlparse

import pytest
import pytest_html
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page, Route

from e2e_tools.constants.timeouts import ERROR_MESSAGES
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.login_page import LoginPage


STUB_SHOP_DIR = Path(__file__).parent / "stub_shop"
STUB_BASE_URL = "http://shop.test"

CALL_REPORT = pytest.StashKey[pytest.TestReport]()
FAILURE_SCREENSHOT = pytest.StashKey[bytes]()


# ================================================================================
# Stub Shop
# ================================================================================

@dataclass
class StubShop:
    """
    Minimal shop frontend with a welcome popup, a login tab and one seeded account.

    The popup is shown until "Start Shopping" is clicked once per browser
    context (remembered in localStorage).
    """
    base_url: str = STUB_BASE_URL
    email: str = "shopper@example.com"
    password: str = "correct-horse-battery"
    pages: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        login_html = (STUB_SHOP_DIR / "login.html").read_text(encoding="utf-8")
        login_html = login_html.replace(
            "{{INVALID_LOGIN}}", html.escape(ERROR_MESSAGES.INVALID_LOGIN)
        ).replace(
            "{{ACCOUNT_JSON}}", json.dumps({"email": self.email, "password": self.password})
        )
        self.pages = {
            "/login": login_html,
            "/shop": (STUB_SHOP_DIR / "shop.html").read_text(encoding="utf-8"),
        }

    async def handle(self, route: Route) -> None:
        path = urlparse(route.request.url).path
        body = self.pages.get(path)
        if body is None:
            await route.fulfill(status=404, content_type="text/plain", body="Not found")
            return
        await route.fulfill(status=200, content_type="text/html; charset=utf-8", body=body)


@pytest.fixture
def stub_shop() -> StubShop:
    """Provides the stub shop served to every UI test context."""
    return StubShop()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Browser manager with a started browser.

    Skips the test when no browser binary is installed
    (run `playwright install chromium`).
    """
    manager = BrowserManager()
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser '{manager.browser_type}' is not available: {e.message}")
    yield manager
    await manager.close()


@pytest.fixture
async def context(
    browser_manager: BrowserManager,
    stub_shop: StubShop,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Isolated browser context with the stub shop routed in.
    """
    context = await browser_manager.new_context()
    await context.route(f"{stub_shop.base_url}/**", stub_shop.handle)
    yield context
    await context.close()


@pytest.fixture
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    stub_shop: StubShop,
) -> AsyncGenerator[Page, None]:
    """
    Page for a single test. Saves a failure screenshot under ``ui.screenshot_dir``.
    """
    page = await context.new_page()
    yield page

    call_report = request.node.stash.get(CALL_REPORT, None)
    if call_report is not None and call_report.failed:
        try:
            request.node.stash[FAILURE_SCREENSHOT] = await BasePage(
                page, base_url=stub_shop.base_url
            ).capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e.message}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, stub_shop: StubShop) -> LoginPage:
    """
    Provides LoginPage instance bound to the stub shop.
    """
    return LoginPage(page, base_url=stub_shop.base_url)


@pytest.fixture
def test_data(stub_shop: StubShop) -> dict:
    """
    Provides common test data for UI tests.
    """
    return {
        "valid_user": {
            "email": stub_shop.email,
            "password": stub_shop.password,
        },
        "invalid_user": {
            "email": "bad@example.com",
            "password": "wrongpass",
        },
    }


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Remember the call-phase report and attach the failure screenshot,
    taken during page teardown, to the teardown report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call":
        item.stash[CALL_REPORT] = report
    elif report.when == "teardown" and FAILURE_SCREENSHOT in item.stash:
        extras = getattr(report, "extras", [])
        extras.append(
            pytest_html.extras.png(
                base64.b64encode(item.stash[FAILURE_SCREENSHOT]).decode("ascii"),
                name="failure_screenshot",
            )
        )
        report.extras = extras
