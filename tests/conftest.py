import logging
from pathlib import Path

import pytest

from uibase.core.browser_manager import service
from uibase.core.browser_manager.service import SESSION_LOGGER_NAME
from uibase.core.config_loader import ConfigLoader

pytest_plugins = ["uibase.pytest_plugin", "pytester"]


class FakeDriver:
    def __init__(self, fail_on_quit=False):
        self.fail_on_quit = fail_on_quit
        self.calls = []
        self.quit_called = False
        self.current_url = "about:blank"

    def delete_all_cookies(self):
        self.calls.append(("delete_all_cookies",))

    def implicitly_wait(self, seconds):
        self.calls.append(("implicitly_wait", seconds))

    def set_page_load_timeout(self, seconds):
        self.calls.append(("set_page_load_timeout", seconds))

    def quit(self):
        self.quit_called = True
        if self.fail_on_quit:
            raise RuntimeError("browser already gone")


@pytest.fixture
def write_properties(tmp_path):
    def _write(text: str, name: str = "config.properties") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_loader(write_properties):
    def _make(**props) -> ConfigLoader:
        text = "\n".join(f"{key}={value}" for key, value in props.items())
        return ConfigLoader(write_properties(text))

    return _make


@pytest.fixture
def fake_drivers(monkeypatch):
    """Replaces driver construction in the manager; records which builder ran."""
    created = []

    def _builder(kind):
        def _build(*args, **kwargs):
            driver = FakeDriver()
            created.append((kind, args, kwargs, driver))
            return driver
        return _build

    monkeypatch.setattr(service, "init_chrome_driver", _builder("chrome"))
    monkeypatch.setattr(service, "init_edge_driver", _builder("edge"))
    monkeypatch.setattr(service, "init_remote_driver", _builder("remote"))
    return created


@pytest.fixture(autouse=True)
def reset_uibase_logger():
    """setup_logger() replaces handlers and disables propagation; undo that between tests."""
    yield
    target = logging.getLogger(SESSION_LOGGER_NAME)
    for handler in target.handlers[:]:
        target.removeHandler(handler)
        handler.close()
    target.setLevel(logging.NOTSET)
    target.propagate = True
