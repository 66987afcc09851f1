# SPDX-License-Identifier: MIT

import math
from typing import Any

from wakabox import time
from wakabox.error import ParseError
from wakabox.model.summary import Language, Summary, SummaryDay


def summary_from_payload(payload: Any) -> Summary:
    """
    Build a Summary from the summaries API shape.

    Used for both live responses and cached documents. Only the fields the
    box needs are kept; everything else in the payload is ignored.

    Raises:
        ParseError: If the payload does not match the summary shape
    """
    if not isinstance(payload, dict):
        raise ParseError(f"summary payload must be an object, got {type(payload).__name__}")

    try:
        start = time.datetime_from_str_utc(str(payload["start"]))
        end = time.datetime_from_str_utc(str(payload["end"]))
        raw_days = payload["data"]
        if not isinstance(raw_days, list):
            raise ParseError("summary 'data' must be a list")
        days = [__day_from_payload(raw_day) for raw_day in raw_days]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ParseError(f"malformed summary payload: {e!r}") from e

    return {"start": start, "end": end, "data": days}


def __day_from_payload(raw_day: Any) -> SummaryDay:
    raw_languages = raw_day["languages"]
    if not isinstance(raw_languages, list):
        raise ParseError("summary day 'languages' must be a list")
    return {"languages": [__language_from_payload(raw) for raw in raw_languages]}


def __language_from_payload(raw_language: Any) -> Language:
    percent = raw_language["percent"]
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        raise ParseError(f"language percent must be a number, got {percent!r}")
    if not math.isfinite(percent):
        raise ParseError(f"language percent must be finite, got {percent!r}")
    return {
        "name": str(raw_language["name"]),
        "text": str(raw_language["text"]),
        "percent": float(percent),
    }


def summary_to_payload(summary: Summary) -> dict[str, Any]:
    return {
        "start": time.datetime_to_iso_str(summary["start"]),
        "end": time.datetime_to_iso_str(summary["end"]),
        "data": [
            {
                "languages": [
                    {
                        "name": language["name"],
                        "text": language["text"],
                        "percent": language["percent"],
                    }
                    for language in day["languages"]
                ]
            }
            for day in summary["data"]
        ],
    }
