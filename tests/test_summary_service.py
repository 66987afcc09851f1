from pathlib import Path
from typing import Optional

from conftest import make_summary

from wakabox.error import ConfigError, NetworkError
from wakabox.model.summary import Summary
from wakabox.repository.cache import SummaryCacheRepository
from wakabox.service.summary import SummaryService


class StubFetcher:
    def __init__(
        self, summary: Optional[Summary] = None, error: Optional[Exception] = None
    ) -> None:
        self.summary = summary
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def fetch(self, date: str, api_key: str) -> Summary:
        self.calls.append((date, api_key))
        if self.error is not None:
            raise self.error
        assert self.summary is not None
        return self.summary


FRESH = make_summary([{"name": "Rust", "text": "3 hrs", "percent": 100.0}])


def _service(tmp_path: Path, fetcher: StubFetcher) -> SummaryService:
    return SummaryService(
        cache=SummaryCacheRepository(tmp_path),
        fetcher=fetcher,  # type: ignore[arg-type]
    )


def test_cache_hit_never_touches_network(tmp_path: Path, summary):
    fetcher = StubFetcher(FRESH)
    service = _service(tmp_path, fetcher)
    service.cache.put("2024-01-15", summary)

    result = service.get_summary("2024-01-15", "key", force_refresh=False)

    assert result == {"summary": summary, "from_cache": True, "error": None}
    assert fetcher.calls == []


def test_cache_miss_fetches_and_persists(tmp_path: Path):
    fetcher = StubFetcher(FRESH)
    service = _service(tmp_path, fetcher)

    result = service.get_summary("2024-01-15", "key")

    assert result == {"summary": FRESH, "from_cache": False, "error": None}
    assert fetcher.calls == [("2024-01-15", "key")]
    assert service.cache.get("2024-01-15") == FRESH


def test_forced_refresh_bypasses_and_overwrites_cache(tmp_path: Path, summary):
    fetcher = StubFetcher(FRESH)
    service = _service(tmp_path, fetcher)
    service.cache.put("2024-01-15", summary)

    result = service.get_summary("2024-01-15", "key", force_refresh=True)

    assert result["from_cache"] is False
    assert result["summary"] == FRESH
    assert len(fetcher.calls) == 1
    assert service.cache.get("2024-01-15") == FRESH


def test_fetch_failure_reports_absence_with_cause(tmp_path: Path, caplog):
    error = NetworkError("error requesting summary for 2024-01-15: timed out")
    fetcher = StubFetcher(error=error)
    service = _service(tmp_path, fetcher)

    result = service.get_summary("2024-01-15", "key")

    assert result == {"summary": None, "from_cache": False, "error": error}
    assert len(fetcher.calls) == 1
    assert service.cache.get("2024-01-15") is None
    assert "no summary available for 2024-01-15" in caplog.text


def test_blank_api_key_is_a_config_error(tmp_path: Path, summary):
    fetcher = StubFetcher(FRESH)
    service = _service(tmp_path, fetcher)
    service.cache.put("2024-01-15", summary)

    result = service.get_summary("2024-01-15", "   ")

    assert result["summary"] is None
    assert isinstance(result["error"], ConfigError)
    assert fetcher.calls == []
