# SPDX-License-Identifier: MIT

import logging
import os
from typing import Final, Optional

_HANDLER_ATTACHED: bool = False
_CONFIGURED_LEVEL: Optional[str] = None
_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT_LOGGER_NAME: Final[str] = "wakabox"


def _resolve_level() -> int:
    level_name = os.getenv("WAKABOX_LOG_LEVEL") or _CONFIGURED_LEVEL or "WARNING"
    return getattr(logging, level_name.upper(), logging.WARNING)


def set_level(level_name: str) -> None:
    """Set the package log level. WAKABOX_LOG_LEVEL still takes precedence."""
    global _CONFIGURED_LEVEL
    _CONFIGURED_LEVEL = level_name
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(_resolve_level())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger, which owns a single stream handler."""
    global _HANDLER_ATTACHED

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not _HANDLER_ATTACHED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)
        package_logger.setLevel(_resolve_level())
        _HANDLER_ATTACHED = True

    return logging.getLogger(name)
