# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from wakabox.error import WakaBoxError
from wakabox.model.summary import Summary


class SummaryResult(TypedDict):
    summary: Optional[Summary]
    from_cache: bool
    error: Optional[WakaBoxError]


class RefreshResult(TypedDict):
    date: str
    note_path: Optional[Path]
    from_cache: bool
    updated: bool
    error: Optional[WakaBoxError]
