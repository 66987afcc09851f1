# SPDX-License-Identifier: MIT

import time as systime
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from wakabox import configuration, time
from wakabox.error import ConfigError
from wakabox.model.result import RefreshResult
from wakabox.model.scheduler import SchedulerState
from wakabox.repository.cache import SummaryCacheRepository
from wakabox.repository.configuration import CONFIGURATION_REPO
from wakabox.repository.daily_note import DailyNoteRepository
from wakabox.service.daily_note import DailyNoteService
from wakabox.service.date_extract import extract_date
from wakabox.service.fetch import SummaryFetcher
from wakabox.service.scheduler import TICK_SECONDS, should_fetch
from wakabox.service.summary import SummaryService
from wakabox.terminal.parse import parse_date
from wakabox.view.box import render_box

console = Console()


def _require_api_key(config: configuration.Configuration) -> str:
    if config["api_key"].strip() == "":
        console.print(
            "[red]WakaTime box: please enter your API key with "
            "'wakabox config set --api-key <key>'[/red]"
        )
        raise typer.Exit(1)
    return config["api_key"]


def _build_summary_service(config: configuration.Configuration) -> SummaryService:
    return SummaryService(
        cache=SummaryCacheRepository(),
        fetcher=SummaryFetcher(timeout=config["request_timeout_seconds"]),
    )


def _build_daily_note_service(
    config: configuration.Configuration,
) -> DailyNoteService:
    notes_path = config["notes_path"]
    return DailyNoteService(
        summary_service=_build_summary_service(config),
        note_repository=DailyNoteRepository(
            Path(notes_path).expanduser() if notes_path is not None else None,
            config["daily_note_format"],
        ),
        api_key=_require_api_key(config),
    )


def _report(result: RefreshResult) -> None:
    error = result["error"]
    if error is not None:
        if isinstance(error, ConfigError):
            console.print(f"[red]WakaTime box: {escape(str(error))}[/red]")
        else:
            console.print(
                f"[red]WakaTime box: no summary available for {result['date']}: "
                f"{escape(str(error))}[/red]"
            )
        raise typer.Exit(1)

    if result["from_cache"]:
        console.print(f"[yellow]WakaTime box: {result['date']} loaded from cache[/yellow]")
    if result["updated"]:
        console.print(
            f"[green]WakaTime box: {result['date']} refreshed in {result['note_path']}[/green]"
        )
    else:
        console.print(f"WakaTime box: {result['note_path']} already up to date")


def today(
    cached: Annotated[
        bool,
        typer.Option("--cached", help="Use a cached summary if one is still fresh"),
    ] = False,
) -> None:
    """Force refetch today's data and update today's daily note."""
    config = CONFIGURATION_REPO.get_config()
    service = _build_daily_note_service(config)
    _report(service.refresh(time.today_local_date_str(), force_refresh=not cached))


def yesterday(
    cached: Annotated[
        bool,
        typer.Option("--cached", help="Use a cached summary if one is still fresh"),
    ] = False,
) -> None:
    """Force refetch yesterday's data and update yesterday's daily note."""
    config = CONFIGURATION_REPO.get_config()
    service = _build_daily_note_service(config)
    _report(service.refresh(time.yesterday_local_date_str(), force_refresh=not cached))


def show(
    date: Annotated[
        str,
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday",
        ),
    ],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip the cache")
    ] = False,
) -> None:
    """Fetch a specific date's data and print the box without touching any note."""
    config = CONFIGURATION_REPO.get_config()
    api_key = _require_api_key(config)
    result = _build_summary_service(config).get_summary(date, api_key, force)

    summary = result["summary"]
    if summary is None:
        console.print(
            f"[red]WakaTime box: no summary available for {date}: "
            f"{escape(str(result['error']))}[/red]"
        )
        raise typer.Exit(1)

    # Plain print so the box can be piped or copied verbatim
    print(render_box(summary))


def note(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="Daily note to update"),
    ],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip the cache")
    ] = False,
) -> None:
    """Update the box in a daily note, using the date in its file name."""
    date = extract_date(path.stem)
    if date is None:
        console.print(f"[red]WakaTime box: failed to extract date from '{path.name}'[/red]")
        raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    service = _build_daily_note_service(config)
    _report(service.refresh(date, force_refresh=force, note_path=path))


def watch(
    max_ticks: Annotated[
        Optional[int],
        typer.Option("--max-ticks", hidden=True, help="Stop after this many ticks"),
    ] = None,
) -> None:
    """Keep today's daily note updated on the configured interval or batch time."""
    config = CONFIGURATION_REPO.get_config()
    service = _build_daily_note_service(config)
    state = SchedulerState()

    mode = (
        f"daily at {config['batch_update_hours']:02d}:{config['batch_update_minutes']:02d}"
        if config["enable_daily_batch_mode"]
        else f"every {config['update_interval_minutes']} minutes"
    )
    console.print(f"WakaTime box: watching, updating {mode}")

    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        if should_fetch(state, config, time.now_utc()):
            result = service.refresh(time.today_local_date_str())
            if result["error"] is not None:
                console.print(
                    f"[red]WakaTime box: {escape(str(result['error']))}[/red]"
                )
            elif result["updated"]:
                console.print(
                    f"[green]WakaTime box: {result['date']} refreshed[/green]"
                )
        ticks += 1
        if max_ticks is None or ticks < max_ticks:
            systime.sleep(TICK_SECONDS)
