import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from uibase.core.config_loader import ConfigLoader

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s'


def setup_logger(config_loader: Optional[ConfigLoader] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Sets up a logger (root logger by default) based on the properties file.
    Handlers already attached to the target logger are replaced, so calling this
    again for the same logger does not duplicate output.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    # --- General Logging Settings ---
    default_log_level_str = config_loader.get_logging_setting('level', 'INFO').upper()
    default_log_format = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)
    log_level = getattr(logging, default_log_level_str, logging.INFO)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if logger_name is not None:
        logger.propagate = config_loader.get_bool_setting('log_propagate', False)

    formatter = logging.Formatter(default_log_format)

    # --- Console Handler Settings ---
    if config_loader.get_bool_setting('log_console_enabled', True):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # --- File Handler Settings ---
    log_file = config_loader.get_logging_setting('file')
    if log_file:
        log_file_path = Path(log_file)
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # The logger is not usable yet, so report on stderr
            print(f"Error: Could not create log directory {log_file_path.parent}. File logging disabled. Error: {e}", file=sys.stderr)
        else:
            rotation_type = config_loader.get_logging_setting('file_rotation')
            max_bytes = config_loader.get_int_setting('log_max_bytes', 1024 * 1024 * 5)
            backup_count = config_loader.get_int_setting('log_backup_count', 5)

            if rotation_type == 'size':
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
                )
            elif rotation_type == 'time':
                file_handler = logging.handlers.TimedRotatingFileHandler(
                    log_file_path, when='midnight', interval=1, backupCount=backup_count, encoding='utf-8'
                )
            else:
                file_handler = logging.FileHandler(log_file_path, encoding='utf-8')

            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
