import json
import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


SETTINGS_FILE = 'q3serverlist.json'
UDP_TIMEOUT = 3.0
BUFFER_SIZE = 65536
LOG_LEVEL = 'WARNING'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


@dataclass(frozen=True)
class Settings:
    buffer_size: int = BUFFER_SIZE
    log_level: str = LOG_LEVEL


def _positive_number(settings, key, default, cast):
    value = settings.get(key, default)
    try:
        value = cast(value)
    except (TypeError, ValueError):
        logger.error(f"Invalid {key} {value!r} in settings, using {default}")
        return default
    if value <= 0:
        logger.error(f"{key} must be positive, got {value}; using {default}")
        return default
    return value


def load_settings(path=SETTINGS_FILE):
    try:
        with open(path, 'r') as f:
            settings = json.load(f)
    except FileNotFoundError:
        logger.debug(f"'{path}' not found. Using default settings.")
        return Settings()
    except json.JSONDecodeError as e:
        logger.error(f"Error reading settings file {path}: {e}. Using default settings.")
        return Settings()

    if not isinstance(settings, dict):
        logger.error(f"Settings file {path} must contain a JSON object. Using default settings.")
        return Settings()

    log_level = str(settings.get('log_level', LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.error(f"Unknown log_level {log_level!r} in {path}, using {LOG_LEVEL}")
        log_level = LOG_LEVEL

    return Settings(
        buffer_size=_positive_number(settings, 'buffer_size', BUFFER_SIZE, int),
        log_level=log_level,
    )


def configure_logging(level=LOG_LEVEL):
    # basicConfig only installs the handler once; later calls just change the level
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(level)
