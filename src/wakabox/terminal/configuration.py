# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from wakabox import configuration
from wakabox.repository.configuration import CONFIGURATION_REPO
from wakabox.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _mask_api_key(api_key: str) -> str:
    if api_key.strip() == "":
        return "[red]not set[/red]"
    return "*" * max(len(api_key) - 4, 0) + api_key[-4:]


def _validate_interval(value: Optional[int]) -> Optional[int]:
    if value is None or value == 0 or 60 <= value <= 1440:
        return value
    raise typer.BadParameter(
        f"Update interval must be 0 or between 60 and 1440 minutes, got {value}"
    )


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("api_key", _mask_api_key(config["api_key"]))
    table.add_row(
        "enable_daily_batch_mode",
        "✓ Enabled" if config["enable_daily_batch_mode"] else "✗ Disabled",
    )
    table.add_row("update_interval_minutes", str(config["update_interval_minutes"]))
    table.add_row(
        "batch_update_time",
        f"{config['batch_update_hours']:02d}:{config['batch_update_minutes']:02d}",
    )
    table.add_row("notes_path", config["notes_path"] or "None")
    table.add_row("daily_note_format", config["daily_note_format"])
    table.add_row("cache_path", str(configuration.CACHE_PATH))
    table.add_row("request_timeout_seconds", str(config["request_timeout_seconds"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)

    if config["enable_daily_batch_mode"]:
        console.print("\nBatch mode is ON: the note is updated once a day at the set time.")
    else:
        console.print("\nBatch mode is OFF: the note is updated at the set interval.")


@app.command("set, s")
def set(
    api_key: Annotated[
        Optional[str],
        typer.Option("--api-key", help="WakaTime API key"),
    ] = None,
    update_interval_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--update-interval-minutes",
            callback=_validate_interval,
            help="How often to update WakaTime data, in minutes (60-1440, 0 for every minute)",
        ),
    ] = None,
    enable_daily_batch_mode: Annotated[
        Optional[bool],
        typer.Option(
            "--daily-batch-mode/--no-daily-batch-mode",
            help="Only update notes once per day",
        ),
    ] = None,
    batch_update_hours: Annotated[
        Optional[int],
        typer.Option(
            "--batch-update-hours", min=0, max=23, help="Hour to update WakaTime data"
        ),
    ] = None,
    batch_update_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--batch-update-minutes",
            min=0,
            max=59,
            help="Minute to update WakaTime data",
        ),
    ] = None,
    notes_path: Annotated[
        Optional[str],
        typer.Option("--notes-path", help="Folder holding the daily notes"),
    ] = None,
    remove_notes_path: Annotated[
        bool, typer.Option("--remove-notes-path", help="Unset the notes folder")
    ] = False,
    daily_note_format: Annotated[
        Optional[str],
        typer.Option(
            "--daily-note-format",
            help="Pendulum format of daily note file names, e.g. YYYY-MM-DD",
        ),
    ] = None,
    cache_path: Annotated[
        Optional[str],
        typer.Option("--cache-path", help="Folder for cached summaries"),
    ] = None,
    remove_cache_path: Annotated[
        bool,
        typer.Option("--remove-cache-path", help="Use the default cache folder"),
    ] = False,
    request_timeout_seconds: Annotated[
        Optional[int],
        typer.Option("--request-timeout-seconds", min=1, help="HTTP request timeout"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        api_key=api_key,
        update_interval_minutes=update_interval_minutes,
        enable_daily_batch_mode=enable_daily_batch_mode,
        batch_update_hours=batch_update_hours,
        batch_update_minutes=batch_update_minutes,
        notes_path=notes_path,
        remove_notes_path=remove_notes_path,
        daily_note_format=daily_note_format,
        cache_path=cache_path,
        remove_cache_path=remove_cache_path,
        request_timeout_seconds=request_timeout_seconds,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    console = Console()
    console.print("[green]Configuration updated[/green]")
