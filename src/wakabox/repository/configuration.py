# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from wakabox import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Keys missing from older or hand-written files fall back to defaults
        config = configuration.get_default_configuration()
        if loaded is not None:
            config.update(loaded)
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        api_key: Optional[str] = None,
        update_interval_minutes: Optional[int] = None,
        enable_daily_batch_mode: Optional[bool] = None,
        batch_update_hours: Optional[int] = None,
        batch_update_minutes: Optional[int] = None,
        notes_path: Optional[str] = None,
        remove_notes_path: bool = False,
        daily_note_format: Optional[str] = None,
        cache_path: Optional[str] = None,
        remove_cache_path: bool = False,
        request_timeout_seconds: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if api_key is not None:
            self.config["api_key"] = api_key.strip()
        if update_interval_minutes is not None:
            self.config["update_interval_minutes"] = update_interval_minutes
        if enable_daily_batch_mode is not None:
            self.config["enable_daily_batch_mode"] = enable_daily_batch_mode
        if batch_update_hours is not None:
            self.config["batch_update_hours"] = batch_update_hours
        if batch_update_minutes is not None:
            self.config["batch_update_minutes"] = batch_update_minutes
        if notes_path is not None:
            self.config["notes_path"] = notes_path
        if remove_notes_path:
            self.config["notes_path"] = None
        if daily_note_format is not None:
            self.config["daily_note_format"] = daily_note_format
        if cache_path is not None:
            self.config["cache_path"] = cache_path
        if remove_cache_path:
            self.config["cache_path"] = None
        if request_timeout_seconds is not None:
            self.config["request_timeout_seconds"] = request_timeout_seconds
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
