# SPDX-License-Identifier: MIT

from typing import Any, Optional

import requests

from wakabox import configuration
from wakabox.error import NetworkError, ParseError
from wakabox.log import get_logger
from wakabox.model.summary import Summary
from wakabox.payload import summary_from_payload

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


def _scrub(message: str, api_key: str) -> str:
    # The key travels in the query string, so it shows up in request errors
    if api_key:
        return message.replace(api_key, "***")
    return message


class SummaryFetcher:
    """Single-attempt client for the summaries endpoint."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = configuration.SUMMARIES_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.timeout = timeout

    def fetch(self, date: str, api_key: str) -> Summary:
        """
        Fetch one day's summary.

        Raises:
            NetworkError: On transport failure or a non-success status
            ParseError: If the body is not JSON or not a summary
        """
        logger.info("start request for %s", date)
        try:
            response = self.session.get(
                self.base_url,
                params={"start": date, "end": date, "api_key": api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(
                _scrub(f"error requesting summary for {date}: {e}", api_key)
            ) from None

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise ParseError(
                _scrub(f"summary response for {date} is not JSON: {e}", api_key)
            ) from None

        summary = summary_from_payload(payload)
        logger.info("success request for %s from summaries API", date)
        return summary
