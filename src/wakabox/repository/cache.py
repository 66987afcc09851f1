# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Optional

import pendulum
import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from wakabox import configuration, time
from wakabox.error import CacheReadError, CacheWriteError, ParseError
from wakabox.log import get_logger
from wakabox.model.summary import Summary
from wakabox.payload import summary_from_payload, summary_to_payload

logger = get_logger(__name__)

CACHE_TTL = pendulum.duration(hours=1)


class SummaryCacheRepository:
    """
    One YAML file per requested date.

    Freshness is judged by the file's modification time, never by anything
    stored inside the payload. Every failure is logged and reported to the
    caller as a miss; nothing here raises.
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        clock: Callable[[], pendulum.DateTime] = time.now_utc,
    ) -> None:
        self._cache_dir = cache_dir
        self._clock = clock

    @property
    def cache_dir(self) -> Path:
        if self._cache_dir is None:
            return configuration.CACHE_PATH
        return self._cache_dir

    def _entry_path(self, key: str) -> Path:
        return self.cache_dir / f"{key}.yaml"

    def get(self, key: str) -> Optional[Summary]:
        path = self._entry_path(key)
        try:
            if not path.is_file():
                return None
            last_modified = time.datetime_from_timestamp(path.stat().st_mtime)
            valid_till = self._clock() - CACHE_TTL
            if last_modified < valid_till:
                logger.debug("cache entry for %s expired at %s", key, last_modified)
                return None
            return self.__read_entry(path)
        except (CacheReadError, OSError) as e:
            logger.error("error loading summary for %s from cache: %s", key, e)
        return None

    def __read_entry(self, path: Path) -> Summary:
        try:
            payload = load(path.read_text(encoding="utf-8"), Loader=Loader)
            return summary_from_payload(payload)
        except (OSError, yaml.YAMLError, ParseError) as e:
            raise CacheReadError(f"{path.name}: {e}") from e

    def put(self, key: str, summary: Summary) -> None:
        try:
            self.__write_entry(self._entry_path(key), summary)
        except CacheWriteError as e:
            logger.error("error saving summary for %s to cache: %s", key, e)

    def __write_entry(self, path: Path, summary: Summary) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                dump(summary_to_payload(summary), Dumper=Dumper, allow_unicode=True),
                encoding="utf-8",
            )
        except (OSError, yaml.YAMLError) as e:
            raise CacheWriteError(f"{path.name}: {e}") from e
