import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .core.config_loader import ConfigLoader
from .core.exceptions import ConfigValueError, UnsupportedBrowserError, UnsupportedExecutionEnvError

logger = logging.getLogger(__name__)

DEFAULT_GRID_URL = 'http://localhost:4444/wd/hub'
DEFAULT_IMPLICIT_WAIT_SECONDS = 10
DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS = 30


class ExecutionEnv(str, Enum):
    LOCAL = 'local'
    REMOTE = 'remote'


class BrowserName(str, Enum):
    CHROME = 'chrome'
    EDGE = 'edge'

    @property
    def capability_name(self) -> str:
        """Browser name as requested from a Selenium Grid."""
        return 'MicrosoftEdge' if self is BrowserName.EDGE else 'chrome'


class PlatformName(str, Enum):
    WINDOWS = 'windows'
    MAC = 'mac'
    LINUX = 'linux'

    @property
    def capability_name(self) -> str:
        """W3C `platformName` value sent to a Selenium Grid."""
        return {
            PlatformName.WINDOWS: 'Windows 11',
            PlatformName.MAC: 'mac',
            PlatformName.LINUX: 'linux',
        }[self]


class SessionSettings(BaseModel):
    execution_env: ExecutionEnv = Field(ExecutionEnv.LOCAL, description="Where the browser runs: 'local' or 'remote'.")
    browser: BrowserName = Field(BrowserName.CHROME, description="Browser to drive: 'chrome' or 'edge'.")
    platform: PlatformName = Field(PlatformName.WINDOWS, description="Platform requested from the grid. Remote only.")
    grid_url: str = Field(DEFAULT_GRID_URL, description="Selenium Grid endpoint for remote sessions.")
    implicit_wait_seconds: int = Field(DEFAULT_IMPLICIT_WAIT_SECONDS, ge=0)
    page_load_timeout_seconds: int = Field(DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS, ge=0)
    headless: bool = False
    window_size: Optional[str] = Field(None, description="'width,height' passed as --window-size.")
    chrome_driver_path: Optional[str] = None
    edge_driver_path: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        return self.execution_env is ExecutionEnv.REMOTE

    @classmethod
    def from_config(cls, config_loader: ConfigLoader) -> 'SessionSettings':
        """
        Resolves session settings from the properties file.

        The execution environment is checked before the browser, and the platform
        is only resolved for remote runs. An unknown platform falls back to
        Windows with a warning instead of failing.
        """
        env_value = config_loader.get_setting('execution_env', 'local').lower()
        browser_value = config_loader.get_setting('browser', 'chrome').lower()

        try:
            execution_env = ExecutionEnv(env_value)
        except ValueError:
            raise UnsupportedExecutionEnvError(f"Unsupported execution_env in config.properties: {env_value}") from None

        platform = PlatformName.WINDOWS
        if execution_env is ExecutionEnv.REMOTE:
            os_value = config_loader.get_setting('os', 'windows').lower()
            try:
                platform = PlatformName(os_value)
            except ValueError:
                logger.warning(f"Unknown OS in config.properties: {os_value}. Defaulting to WINDOWS.")

        try:
            browser = BrowserName(browser_value)
        except ValueError:
            mode = 'remote execution' if execution_env is ExecutionEnv.REMOTE else 'local execution'
            raise UnsupportedBrowserError(f"Unsupported browser for {mode}: {browser_value}") from None

        implicit_wait = config_loader.get_int_setting('implicit_wait_seconds', DEFAULT_IMPLICIT_WAIT_SECONDS)
        page_load_timeout = config_loader.get_int_setting('page_load_timeout_seconds', DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS)
        if implicit_wait < 0 or page_load_timeout < 0:
            raise ConfigValueError("Timeouts in config.properties must not be negative.")

        return cls(
            execution_env=execution_env,
            browser=browser,
            platform=platform,
            grid_url=config_loader.get_setting('grid_url', DEFAULT_GRID_URL) or DEFAULT_GRID_URL,
            implicit_wait_seconds=implicit_wait,
            page_load_timeout_seconds=page_load_timeout,
            headless=config_loader.get_bool_setting('headless', False),
            window_size=config_loader.get_setting('window_size') or None,
            chrome_driver_path=config_loader.get_setting('chrome_driver_path') or None,
            edge_driver_path=config_loader.get_setting('edge_driver_path') or None,
        )
