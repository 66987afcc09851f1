# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Language(TypedDict):
    name: str
    text: str
    percent: float


class SummaryDay(TypedDict):
    languages: list[Language]


class Summary(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    data: list[SummaryDay]
