# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "wakabox"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Replaced by load_cache_path_configuration() when cache_path is configured
CACHE_PATH: Path = platformdirs.user_cache_path(APP_NAME) / "summaries"

SUMMARIES_URL = "https://wakatime.com/api/v1/users/current/summaries"
BOX_MARKER = "```wakatime"
BOX_FENCE = "```"


class Configuration(TypedDict):
    api_key: str
    update_interval_minutes: int
    enable_daily_batch_mode: bool
    batch_update_hours: int
    batch_update_minutes: int
    notes_path: Optional[str]
    daily_note_format: str
    cache_path: Optional[str]
    request_timeout_seconds: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "api_key": "",
        "update_interval_minutes": 0,
        "enable_daily_batch_mode": False,
        "batch_update_hours": 0,
        "batch_update_minutes": 0,
        "notes_path": None,
        "daily_note_format": "YYYY-MM-DD",
        "cache_path": None,
        "request_timeout_seconds": 30,
        "log_level": "WARNING",
    }


def load_cache_path_configuration() -> None:
    """
    Load the configuration and point CACHE_PATH at the configured directory.

    This must be called after the config file exists and before the cache
    repository is instantiated.
    """
    global CACHE_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    cache_path_setting = config.get("cache_path")

    if cache_path_setting is not None:
        CACHE_PATH = Path(cache_path_setting).expanduser()
