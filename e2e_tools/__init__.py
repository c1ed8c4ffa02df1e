"""
================================================================================
E2E Tools
================================================================================

Shared infrastructure for the shop test suites.

Modules:
    - common: Configuration loading and loguru setup
    - constants: Timeouts and canonical UI error messages

Example:
    from e2e_tools.common import get_config, init_logger
    from e2e_tools.constants import TIMEOUTS

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "constants",
]
