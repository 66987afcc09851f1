import os
from pathlib import Path

import pendulum

from wakabox.repository.cache import SummaryCacheRepository

NOW = pendulum.datetime(2024, 1, 15, 12, 0, 0, tz="UTC")


def _set_mtime(path: Path, moment: pendulum.DateTime) -> None:
    timestamp = moment.timestamp()
    os.utime(path, (timestamp, timestamp))


def test_get_missing_entry_returns_none(tmp_path: Path):
    cache = SummaryCacheRepository(tmp_path / "cache", clock=lambda: NOW)
    assert cache.get("2024-01-15") is None


def test_put_creates_directory_and_round_trips(tmp_path: Path, summary):
    cache_dir = tmp_path / "nested" / "cache"
    cache = SummaryCacheRepository(cache_dir)

    cache.put("2024-01-15", summary)

    assert (cache_dir / "2024-01-15.yaml").is_file()
    assert cache.get("2024-01-15") == summary


def test_entry_valid_for_one_hour(tmp_path: Path, summary):
    cache = SummaryCacheRepository(tmp_path, clock=lambda: NOW)
    cache.put("2024-01-15", summary)
    entry = tmp_path / "2024-01-15.yaml"

    _set_mtime(entry, NOW.subtract(minutes=59))
    assert cache.get("2024-01-15") == summary

    _set_mtime(entry, NOW.subtract(minutes=61))
    assert cache.get("2024-01-15") is None


def test_corrupt_entry_is_a_miss(tmp_path: Path, caplog):
    (tmp_path / "2024-01-15.yaml").write_text("start: [unclosed\n")
    cache = SummaryCacheRepository(tmp_path)

    assert cache.get("2024-01-15") is None
    assert "error loading summary for 2024-01-15" in caplog.text


def test_entry_with_wrong_shape_is_a_miss(tmp_path: Path):
    (tmp_path / "2024-01-15.yaml").write_text("start: 2024-01-15\nend: 2024-01-15\n")
    cache = SummaryCacheRepository(tmp_path)

    assert cache.get("2024-01-15") is None


def test_put_overwrites_previous_entry(tmp_path: Path, summary):
    cache = SummaryCacheRepository(tmp_path)
    cache.put("2024-01-15", summary)

    summary["data"][0]["languages"] = [{"name": "Rust", "text": "5 mins", "percent": 100.0}]
    cache.put("2024-01-15", summary)

    cached = cache.get("2024-01-15")
    assert cached is not None
    assert cached["data"][0]["languages"][0]["name"] == "Rust"


def test_put_failure_is_logged_not_raised(tmp_path: Path, summary, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    cache = SummaryCacheRepository(blocker / "cache")

    cache.put("2024-01-15", summary)

    assert "error saving summary for 2024-01-15" in caplog.text
    assert cache.get("2024-01-15") is None


def test_unusable_entry_name_is_a_miss(tmp_path: Path):
    cache = SummaryCacheRepository(tmp_path)

    assert cache.get("x" * 300) is None
