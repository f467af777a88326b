import logging
import shutil
from typing import Optional, Union

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from uibase.core.exceptions import GridConnectionError
from .constants import CHROME_DRIVER_BINARY, EDGE_DRIVER_BINARY

logger = logging.getLogger(__name__)


def init_chrome_driver(options: ChromeOptions, *, configured_path: Optional[str] = None) -> WebDriver:
    local_driver = configured_path or shutil.which(CHROME_DRIVER_BINARY)
    if local_driver:
        logger.info(f"Using local chromedriver at: {local_driver}")
        service = ChromeService(executable_path=local_driver)
    else:
        logger.info("Local chromedriver not found. Falling back to webdriver_manager (requires internet).")
        service = ChromeService(ChromeDriverManager().install())
    return webdriver.Chrome(service=service, options=options)


def init_edge_driver(options: EdgeOptions, *, configured_path: Optional[str] = None) -> WebDriver:
    local_driver = configured_path or shutil.which(EDGE_DRIVER_BINARY)
    if local_driver:
        logger.info(f"Using local msedgedriver at: {local_driver}")
        service = EdgeService(executable_path=local_driver)
    else:
        logger.info("Local msedgedriver not found. Falling back to webdriver_manager (requires internet).")
        service = EdgeService(EdgeChromiumDriverManager().install())
    return webdriver.Edge(service=service, options=options)


def init_remote_driver(grid_url: str, options: Union[ChromeOptions, EdgeOptions]) -> WebDriver:
    logger.info(f"Requesting remote {options.capabilities.get('browserName')} session from grid at {grid_url}")
    try:
        return webdriver.Remote(command_executor=grid_url, options=options)
    except Exception as e:
        raise GridConnectionError(f"Could not start a remote session at {grid_url}: {e}") from e
