# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from wakabox import configuration, log
from wakabox.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    configuration.load_cache_path_configuration()
    configuration.CACHE_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    log.set_level(config["log_level"])


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
