# SPDX-License-Identifier: MIT

import re
from typing import Callable, Optional

import pendulum

from wakabox import time

DateExtractor = Callable[[str], Optional[str]]

# Gregorian year of the era's first year, minus one
JAPANESE_ERA_OFFSETS = {
    "令和": 2018,
    "平成": 1988,
    "昭和": 1925,
}

_YEAR_FIRST_P = re.compile(r"(\d{4})[-/._年](\d{1,2})[-/._月](\d{1,2})日?")
_JAPANESE_ERA_P = re.compile(r"(令和|平成|昭和)(元|\d{1,2})年(\d{1,2})月(\d{1,2})日")
_YEAR_LAST_P = re.compile(r"(\d{1,2})[-_/](\d{1,2})[-_/](\d{4})")


def _to_date_str(year: int, month: int, day: int) -> Optional[str]:
    try:
        return time.date_to_str(pendulum.date(year, month, day))
    except ValueError:
        return None


def extract_year_first(name: str) -> Optional[str]:
    """2024-01-05, 2024.1.5, 2024_01_05, 2024年1月5日"""
    match = _YEAR_FIRST_P.search(name)
    if not match:
        return None
    return _to_date_str(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def extract_japanese_era(name: str) -> Optional[str]:
    """令和6年1月5日, 令和元年5月1日"""
    match = _JAPANESE_ERA_P.search(name)
    if not match:
        return None
    era_year = 1 if match.group(2) == "元" else int(match.group(2))
    year = JAPANESE_ERA_OFFSETS[match.group(1)] + era_year
    return _to_date_str(year, int(match.group(3)), int(match.group(4)))


def extract_year_last(name: str) -> Optional[str]:
    """1-5-2024, 01_05_2024 (month first)"""
    match = _YEAR_LAST_P.search(name)
    if not match:
        return None
    return _to_date_str(int(match.group(3)), int(match.group(1)), int(match.group(2)))


DEFAULT_EXTRACTORS: list[DateExtractor] = [
    extract_year_first,
    extract_japanese_era,
    extract_year_last,
]


def extract_date(
    name: str, extractors: Optional[list[DateExtractor]] = None
) -> Optional[str]:
    """
    Return the first 'YYYY-MM-DD' date any extractor finds in a note name.

    Extractors run in order; pass a custom list to support other naming
    schemes.
    """
    for extractor in extractors if extractors is not None else DEFAULT_EXTRACTORS:
        date = extractor(name)
        if date is not None:
            return date
    return None
