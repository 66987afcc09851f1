from typing import Any

import pendulum
import pytest

from wakabox.model.summary import Summary


def make_payload(languages: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "start": "2024-01-15T00:00:00Z",
        "end": "2024-01-15T23:59:59Z",
        "data": [{"languages": languages, "grand_total": {"text": "2 hrs"}}],
        "cumulative_total": {"seconds": 7200.0},
    }


def make_summary(languages: list[dict[str, Any]]) -> Summary:
    return {
        "start": pendulum.datetime(2024, 1, 15, tz="UTC"),
        "end": pendulum.datetime(2024, 1, 15, 23, 59, 59, tz="UTC"),
        "data": [{"languages": languages}],  # type: ignore[typeddict-item]
    }


@pytest.fixture
def summary() -> Summary:
    return make_summary(
        [
            {"name": "Python", "text": "1 hr 30 mins", "percent": 75.0},
            {"name": "Go", "text": "30 mins", "percent": 25.0},
        ]
    )
