"""
Logging setup for the registration portal.

``setup_logging`` takes the application ``Settings`` and installs the
service's own handlers on the root logger: one console handler and,
when ``LOG_FILE`` is set, a UTF‑8 file handler.  Handlers are named so
repeated ``create_app`` calls (tests, reloads) do not stack duplicates;
a second call only reapplies levels.  With ``DEBUG`` on, the
``registration_portal_api`` loggers emit debug records while libraries
stay at the configured level.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "registration_portal_api"

CONSOLE_HANDLER_NAME = "registration-portal-console"
FILE_HANDLER_NAME = "registration-portal-file"


def resolve_level(name: str) -> int:
    """Numeric level for a level name; unknown names mean ``INFO``."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(config: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER_NAME)
    handlers: List[logging.Handler] = [console]

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Settings) -> None:
    """Configure logging from the application settings."""
    root = logging.getLogger()
    level = resolve_level(config.log_level)
    root.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if config.debug else level)

    installed = {handler.get_name() for handler in root.handlers}
    if CONSOLE_HANDLER_NAME in installed:
        return
    for handler in _build_handlers(config):
        root.addHandler(handler)
