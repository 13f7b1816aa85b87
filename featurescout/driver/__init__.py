"""
Page-driver abstraction.

Exports:
- PageDriver, ElementHandle: capability interfaces used by the pipeline
- PlaywrightPageDriver, PlaywrightElementHandle: Playwright adapter
"""

from featurescout.driver.base import PageDriver, ElementHandle
from featurescout.driver.playwright_driver import PlaywrightPageDriver, PlaywrightElementHandle

__all__ = [
    "PageDriver",
    "ElementHandle",
    "PlaywrightPageDriver",
    "PlaywrightElementHandle",
]
