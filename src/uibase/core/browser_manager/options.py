import logging
from typing import Optional, Union

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions

from uibase.data_models import BrowserName, SessionSettings

logger = logging.getLogger(__name__)


def new_browser_options(browser: BrowserName) -> Union[ChromeOptions, EdgeOptions]:
    if browser is BrowserName.EDGE:
        return EdgeOptions()
    return ChromeOptions()


def configure_driver_options(
    options: Union[ChromeOptions, EdgeOptions],
    *,
    headless: bool,
    window_size: Optional[str],
    platform_name: Optional[str] = None,
) -> Union[ChromeOptions, EdgeOptions]:
    if headless:
        options.add_argument('--headless=new')
        options.add_argument('--disable-gpu')

    if window_size:
        options.add_argument(f"--window-size={window_size}")

    # Only set for grid requests; a local driver rejects a mismatching platformName
    if platform_name:
        options.platform_name = platform_name

    return options


def build_options(settings: SessionSettings) -> Union[ChromeOptions, EdgeOptions]:
    """Builds the options (the capability set for remote runs) for the configured browser."""
    platform_name = settings.platform.capability_name if settings.is_remote else None
    options = configure_driver_options(
        new_browser_options(settings.browser),
        headless=settings.headless,
        window_size=settings.window_size,
        platform_name=platform_name,
    )
    if settings.is_remote:
        logger.debug(
            f"Remote capabilities: browserName={options.capabilities.get('browserName')}, "
            f"platformName={platform_name}"
        )
    return options
