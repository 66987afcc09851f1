# SPDX-License-Identifier: MIT

from typing import Optional

from wakabox.error import ConfigError, NetworkError, ParseError
from wakabox.log import get_logger
from wakabox.model.result import SummaryResult
from wakabox.repository.cache import SummaryCacheRepository
from wakabox.service.fetch import SummaryFetcher

logger = get_logger(__name__)


class SummaryService:
    """
    Cache-aware access to daily summaries.

    Nothing is raised to the caller: a missing API key, a failed request or
    an unparseable response all come back as a result with ``summary`` set
    to None and the cause in ``error``.
    """

    def __init__(
        self,
        cache: Optional[SummaryCacheRepository] = None,
        fetcher: Optional[SummaryFetcher] = None,
    ) -> None:
        self.cache = cache if cache is not None else SummaryCacheRepository()
        self.fetcher = fetcher if fetcher is not None else SummaryFetcher()

    def get_summary(
        self, date: str, api_key: str, force_refresh: bool = False
    ) -> SummaryResult:
        if api_key.strip() == "":
            return {
                "summary": None,
                "from_cache": False,
                "error": ConfigError("please enter your API key in the settings"),
            }

        if not force_refresh:
            cached = self.cache.get(date)
            if cached is not None:
                logger.info("success request for %s from cache", date)
                return {"summary": cached, "from_cache": True, "error": None}

        try:
            summary = self.fetcher.fetch(date, api_key)
        except (NetworkError, ParseError) as e:
            logger.error("no summary available for %s: %s", date, e)
            return {"summary": None, "from_cache": False, "error": e}

        self.cache.put(date, summary)
        return {"summary": summary, "from_cache": False, "error": None}
