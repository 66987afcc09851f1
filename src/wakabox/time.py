# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

DATE_FORMAT = "YYYY-MM-DD"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse an ISO timestamp and normalize it to UTC."""
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_timestamp(timestamp: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(timestamp, tz="UTC")


def date_from_str(date_str: str) -> pendulum.Date:
    """
    Parse a strict 'YYYY-MM-DD' string.

    Raises:
        ValueError: If the string is not a valid calendar date in that format
    """
    return pendulum.from_format(date_str, DATE_FORMAT).date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def normalize_date_str(date_str: str) -> str:
    return date_to_str(date_from_str(date_str))


def today_local_date_str() -> str:
    return now_local().format(DATE_FORMAT)


def yesterday_local_date_str() -> str:
    return now_local().subtract(days=1).format(DATE_FORMAT)
