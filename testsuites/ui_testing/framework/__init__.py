"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - page_base: Base page object for navigation and screenshots
    - browser_manager: Browser lifecycle management

================================================================================
"""

from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "BasePage",
    "BrowserManager",
]
