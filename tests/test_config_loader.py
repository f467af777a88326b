import pytest

from uibase.core.config_loader import ConfigLoader, default_properties_file, parse_properties
from uibase.core.exceptions import ConfigLoadError, ConfigValueError


def test_parse_properties_separators_and_comments():
    text = """
# comment
! another comment
execution_env = remote
browser:edge
os linux
grid_url=http://grid:4444/wd/hub
empty=
"""
    props = parse_properties(text)
    assert props == {
        "execution_env": "remote",
        "browser": "edge",
        "os": "linux",
        "grid_url": "http://grid:4444/wd/hub",
        "empty": "",
    }


def test_parse_properties_line_continuation_and_duplicates():
    text = "window_size=1400,\\\n    900\nbrowser=chrome\nbrowser=edge\n"
    props = parse_properties(text)
    assert props["window_size"] == "1400,900"
    assert props["browser"] == "edge"


def test_load_configuration_is_cached(write_properties):
    path = write_properties("browser=chrome\n")
    loader = ConfigLoader(path)

    first = loader.load_configuration()
    path.write_text("browser=edge\n", encoding="utf-8")
    second = loader.load_configuration()

    assert first is second
    assert second["browser"] == "chrome"


def test_loaded_configuration_is_read_only(write_properties):
    loader = ConfigLoader(write_properties("browser=chrome\n"))
    with pytest.raises(TypeError):
        loader.load_configuration()["browser"] = "edge"


def test_missing_file_raises(tmp_path):
    loader = ConfigLoader(tmp_path / "nope.properties")
    with pytest.raises(ConfigLoadError, match="not found"):
        loader.load_configuration()


def test_directory_raises(tmp_path):
    with pytest.raises(ConfigLoadError, match="not a file"):
        ConfigLoader(tmp_path).load_configuration()


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "config.properties"
    path.write_bytes(b"browser=\xff\xfe\xfa")
    with pytest.raises(ConfigLoadError, match="Could not read"):
        ConfigLoader(path).load_configuration()


def test_default_path_is_relative_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert default_properties_file() == tmp_path / "config" / "config.properties"
    assert ConfigLoader().properties_file == tmp_path / "config" / "config.properties"


def test_typed_getters(make_loader):
    loader = make_loader(implicit_wait_seconds=" 7 ", headless="Yes", bad_int="ten", bad_bool="maybe")

    assert loader.get_setting("implicit_wait_seconds") == "7"
    assert loader.get_setting("missing", "fallback") == "fallback"
    assert loader.get_int_setting("implicit_wait_seconds", 10) == 7
    assert loader.get_int_setting("missing", 10) == 10
    assert loader.get_bool_setting("headless") is True
    assert loader.get_bool_setting("missing", True) is True

    with pytest.raises(ConfigValueError):
        loader.get_int_setting("bad_int", 10)
    with pytest.raises(ConfigValueError):
        loader.get_bool_setting("bad_bool")
