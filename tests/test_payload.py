import pendulum
import pytest
from conftest import make_payload

from wakabox.error import ParseError
from wakabox.payload import summary_from_payload, summary_to_payload


def test_summary_from_api_payload_keeps_order_and_converts_types():
    summary = summary_from_payload(
        make_payload(
            [
                {"name": "Python", "text": "2 hrs", "percent": 80, "total_seconds": 7200},
                {"name": "Markdown", "text": "30 mins", "percent": 20.0},
            ]
        )
    )

    assert summary["start"] == pendulum.datetime(2024, 1, 15, tz="UTC")
    assert summary["start"].timezone_name == "UTC"
    assert summary["data"][0]["languages"] == [
        {"name": "Python", "text": "2 hrs", "percent": 80.0},
        {"name": "Markdown", "text": "30 mins", "percent": 20.0},
    ]


def test_summary_to_payload_is_accepted_back(summary):
    assert summary_from_payload(summary_to_payload(summary)) == summary


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"start": "2024-01-15", "end": "2024-01-15"},
        {"start": "nope", "end": "2024-01-15", "data": []},
        {"start": "2024-01-15", "end": "2024-01-15", "data": {"languages": []}},
        {"start": "2024-01-15", "end": "2024-01-15", "data": [{"languages": [{}]}]},
        make_payload([{"name": "Go", "text": "1 min", "percent": "12"}]),
        make_payload([{"name": "Go", "text": "1 min", "percent": float("nan")}]),
        make_payload([{"name": "Go", "text": "1 min", "percent": float("inf")}]),
    ],
)
def test_malformed_payload_raises_parse_error(payload):
    with pytest.raises(ParseError):
        summary_from_payload(payload)
