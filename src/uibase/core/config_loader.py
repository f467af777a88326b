import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import ConfigLoadError, ConfigValueError

CONFIG_DIR_NAME = 'config'
CONFIG_FILE_NAME = 'config.properties'

_TRUE_VALUES = {'1', 'true', 'yes', 'y', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'n', 'off'}

logger = logging.getLogger(__name__)


def default_properties_file() -> Path:
    """Path of the properties file relative to the current working directory."""
    return Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip('\\'))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple:
    for index, char in enumerate(line):
        if char in '=:':
            return line[:index].strip(), line[index + 1:].strip()
        if char.isspace():
            key = line[:index]
            rest = line[index:].lstrip()
            if rest[:1] in ('=', ':'):
                rest = rest[1:]
            return key.strip(), rest.strip()
    return line.strip(), ''


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parses `key=value` properties text.

    Supports `=`, `:` or whitespace as separators, `#` and `!` comment lines,
    and backslash line continuations. Later duplicate keys override earlier ones.
    """
    entries: Dict[str, str] = {}
    pending = ''
    for raw_line in text.splitlines():
        line = raw_line.lstrip() if pending else raw_line.strip()
        if not pending and (not line or line[0] in '#!'):
            continue
        if _ends_with_continuation(line):
            pending += line[:-1]
            continue
        logical = pending + line
        pending = ''
        key, value = _split_entry(logical.strip())
        if key:
            entries[key] = value
    if pending:
        key, value = _split_entry(pending.strip())
        if key:
            entries[key] = value
    return entries


class ConfigLoader:
    def __init__(self, properties_file: Optional[Union[str, Path]] = None):
        """
        Initializes the ConfigLoader. Nothing is read until the first access.

        Args:
            properties_file (Union[str, Path], optional): Path to the properties file.
                                                          Defaults to 'config/config.properties'
                                                          under the current working directory.
        """
        self.properties_file: Path = Path(properties_file) if properties_file else default_properties_file()
        self._properties: Optional[Mapping[str, str]] = None

    def _load_properties(self, file_path: Path) -> Dict[str, str]:
        if not file_path.exists():
            raise ConfigLoadError(f"Configuration file not found: {file_path}")
        if not file_path.is_file():
            raise ConfigLoadError(f"Configuration path is not a file: {file_path}")
        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = parse_properties(f.read())
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Could not read configuration file {file_path}: {e}") from e
        logger.debug(f"Loaded {len(data)} properties from {file_path}")
        return data

    def load_configuration(self) -> Mapping[str, str]:
        """Returns the cached read-only properties, loading them on first call."""
        if self._properties is None:
            self._properties = MappingProxyType(self._load_properties(self.properties_file))
        return self._properties

    def get_setting(self, key: str, default: Any = None) -> Any:
        value = self.load_configuration().get(key)
        if value is None:
            logger.debug(f"Setting '{key}' not found. Returning default: {default}")
            return default
        return value.strip()

    def get_int_setting(self, key: str, default: int) -> int:
        value = self.get_setting(key)
        if value is None or value == '':
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValueError(f"Setting '{key}' must be an integer, got '{value}'") from e

    def get_bool_setting(self, key: str, default: bool = False) -> bool:
        value = self.get_setting(key)
        if value is None or value == '':
            return default
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigValueError(f"Setting '{key}' must be a boolean, got '{value}'")

    def get_logging_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a `log_`-prefixed setting."""
        return self.get_setting(f'log_{setting_name}', default)
