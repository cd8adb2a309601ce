import logging
import sys
from typing import Optional, Union

from weathermood import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Per-request connection chatter from requests' pool
QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[Union[int, str]] = None) -> int:
    """
    Set up stdout logging for the WeatherMood backend.

    `level` may be a logging constant or a name ("debug", "INFO"); it
    defaults to LOG_LEVEL from the environment, and unknown names fall back
    to INFO. When uvicorn has already installed handlers only the level is
    adjusted. Returns the level applied.
    """
    resolved = _resolve_level(level)
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    root.setLevel(resolved)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return resolved
