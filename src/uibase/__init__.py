"""Selenium WebDriver session bootstrapping for UI test suites."""

from .core import (
    ConfigLoader,
    ConfigLoadError,
    ConfigValueError,
    GridConnectionError,
    SessionInitError,
    UnsupportedBrowserError,
    UnsupportedExecutionEnvError,
)
from .data_models import BrowserName, ExecutionEnv, PlatformName, SessionSettings
from .core.browser_manager import BrowserManager
from .utils import random_alpha, random_alphanumeric, random_numeric, setup_logger

__version__ = "0.1.0"

__all__ = [
    "BrowserManager",
    "BrowserName",
    "ConfigLoader",
    "ConfigLoadError",
    "ConfigValueError",
    "ExecutionEnv",
    "GridConnectionError",
    "PlatformName",
    "SessionInitError",
    "SessionSettings",
    "UnsupportedBrowserError",
    "UnsupportedExecutionEnvError",
    "random_alpha",
    "random_alphanumeric",
    "random_numeric",
    "setup_logger",
]
