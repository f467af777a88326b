from selenium.common.exceptions import WebDriverException


class ConfigLoadError(Exception):
    """Raised when the properties file is missing, not a file, or unreadable."""


class ConfigValueError(ConfigLoadError):
    """Raised when a configuration value cannot be converted to the expected type."""


class UnsupportedExecutionEnvError(WebDriverException):
    pass


class UnsupportedBrowserError(WebDriverException):
    pass


class SessionInitError(WebDriverException):
    """Raised when no WebDriver handle exists after the setup attempt."""


class GridConnectionError(SessionInitError):
    """Raised when a remote session cannot be requested from the grid."""
