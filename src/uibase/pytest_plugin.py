"""
pytest fixtures for UI tests.

Enable in a conftest.py with:

    pytest_plugins = ["uibase.pytest_plugin"]

Each test requesting `driver` or `browser_manager` gets a fresh WebDriver
session, created on setup and closed on teardown.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import pytest
from selenium.webdriver.remote.webdriver import WebDriver

from uibase.core.browser_manager import BrowserManager
from uibase.core.config_loader import ConfigLoader


def pytest_addoption(parser):
    group = parser.getgroup("uibase")
    group.addoption(
        "--uibase-config",
        action="store",
        default=None,
        help="Path to the properties file. Defaults to config/config.properties under the working directory.",
    )


def open_browser_session(config_loader: ConfigLoader) -> Iterator[BrowserManager]:
    """Creates a session, yields its manager and always closes the session afterwards."""
    manager = BrowserManager(config_loader)
    manager.create_session()
    try:
        yield manager
    finally:
        manager.close_session()


def make_config_loader(config_path: Optional[Union[str, Path]]) -> ConfigLoader:
    loader = ConfigLoader(config_path)
    loader.load_configuration()
    return loader


@pytest.fixture(scope="session")
def uibase_config(request) -> ConfigLoader:
    return make_config_loader(request.config.getoption("--uibase-config"))


@pytest.fixture
def browser_manager(uibase_config: ConfigLoader) -> Iterator[BrowserManager]:
    yield from open_browser_session(uibase_config)


@pytest.fixture
def driver(browser_manager: BrowserManager) -> WebDriver:
    return browser_manager.get_session()


@pytest.fixture
def uibase_logger(browser_manager: BrowserManager) -> logging.Logger:
    return browser_manager.get_logger()
