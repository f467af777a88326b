import logging
from typing import Mapping, Optional

from selenium.webdriver.remote.webdriver import WebDriver

from uibase.core.config_loader import ConfigLoader
from uibase.core.exceptions import SessionInitError
from uibase.data_models import BrowserName, SessionSettings
from uibase.utils.logger import setup_logger
from .constants import set_wdm_ssl_verify
from .drivers import init_chrome_driver, init_edge_driver, init_remote_driver
from .options import build_options

SESSION_LOGGER_NAME = 'uibase'

logger = logging.getLogger(__name__)


class BrowserManager:
    """
    Owns one test run's configuration, WebDriver session and logger.

    At most one session is open per manager; creating a new one closes the
    previous one first. Not safe for concurrent use.
    """

    def __init__(self, config_loader: Optional[ConfigLoader] = None):
        self.config_loader = config_loader if config_loader else ConfigLoader()
        self.driver: Optional[WebDriver] = None
        self.settings: Optional[SessionSettings] = None
        self._logger: Optional[logging.Logger] = None

    def load_configuration(self) -> Mapping[str, str]:
        return self.config_loader.load_configuration()

    def create_session(self) -> WebDriver:
        settings = SessionSettings.from_config(self.config_loader)

        if self.driver is not None:
            logger.info("Closing the previous WebDriver session before creating a new one.")
            self.close_session()

        wdm_ssl_verify = self.config_loader.get_setting('webdriver_manager_ssl_verify')
        if wdm_ssl_verify is not None:
            set_wdm_ssl_verify(self.config_loader.get_bool_setting('webdriver_manager_ssl_verify'))
            logger.info("WebDriver Manager SSL verification set.")

        options = build_options(settings)
        driver: Optional[WebDriver]
        if settings.is_remote:
            driver = init_remote_driver(settings.grid_url, options)
        elif settings.browser is BrowserName.EDGE:
            driver = init_edge_driver(options, configured_path=settings.edge_driver_path)
        else:
            driver = init_chrome_driver(options, configured_path=settings.chrome_driver_path)

        if driver is None:
            raise SessionInitError("WebDriver was not initialized. Check your config.properties.")

        try:
            driver.delete_all_cookies()
            driver.implicitly_wait(settings.implicit_wait_seconds)
            driver.set_page_load_timeout(settings.page_load_timeout_seconds)
        except Exception:
            logger.error("WebDriver post-setup failed. Quitting the new session.", exc_info=True)
            try:
                driver.quit()
            except Exception as quit_error:
                logger.warning(f"Error closing WebDriver after failed setup: {quit_error}")
            raise

        self.driver = driver
        self.settings = settings
        logger.info(
            f"{settings.browser.value.capitalize()} WebDriver initialized "
            f"({settings.execution_env.value} execution)."
        )
        return driver

    def get_session(self) -> Optional[WebDriver]:
        return self.driver

    def get_logger(self) -> logging.Logger:
        if self._logger is None:
            self._logger = setup_logger(self.config_loader, SESSION_LOGGER_NAME)
        return self._logger

    def close_session(self) -> None:
        if self.driver:
            try:
                self.driver.quit()
                logger.info("WebDriver session closed.")
            except Exception as e:
                # Cleanup must not mask the failure of the test that is tearing down
                logger.warning(f"Error closing WebDriver: {e}", exc_info=True)
            finally:
                self.driver = None
                self.settings = None

    def is_session_active(self) -> bool:
        if not self.driver:
            return False
        try:
            _ = self.driver.current_url
            return True
        except Exception:
            logger.warning("WebDriver is not responsive.")
            return False

    def __enter__(self):
        if not self.driver or not self.is_session_active():
            self.create_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_session()
