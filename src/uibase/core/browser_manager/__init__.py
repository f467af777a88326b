"""
Browser manager package.

Public API:
- BrowserManager: configures, creates, exposes and closes one Selenium WebDriver session.
"""

from .service import BrowserManager

__all__ = ["BrowserManager"]
