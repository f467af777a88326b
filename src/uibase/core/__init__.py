# This file makes uibase.core a Python package and exposes the configuration layer.
# BrowserManager lives in uibase.core.browser_manager; it depends on uibase.data_models,
# which imports from this package, so it is not re-exported here.

from .config_loader import ConfigLoader
from .exceptions import (
    ConfigLoadError,
    ConfigValueError,
    GridConnectionError,
    SessionInitError,
    UnsupportedBrowserError,
    UnsupportedExecutionEnvError,
)

__all__ = [
    "ConfigLoader",
    "ConfigLoadError",
    "ConfigValueError",
    "GridConnectionError",
    "SessionInitError",
    "UnsupportedBrowserError",
    "UnsupportedExecutionEnvError",
]
