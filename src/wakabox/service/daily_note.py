# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from wakabox.error import ConfigError, DocumentMergeError
from wakabox.log import get_logger
from wakabox.model.result import RefreshResult
from wakabox.repository.daily_note import DailyNoteRepository
from wakabox.service.summary import SummaryService
from wakabox.view.box import render_box
from wakabox.view.merge import merge_box

logger = get_logger(__name__)


class DailyNoteService:
    def __init__(
        self,
        summary_service: SummaryService,
        note_repository: DailyNoteRepository,
        api_key: str,
    ) -> None:
        self.summary_service = summary_service
        self.note_repository = note_repository
        self.api_key = api_key

    def refresh(
        self,
        date: str,
        force_refresh: bool = False,
        note_path: Optional[Path] = None,
    ) -> RefreshResult:
        """
        Fetch the summary for ``date`` and merge its box into the daily note.

        ``note_path`` targets an existing note directly; otherwise the note
        is looked up by date in the notes folder and created when missing.
        """
        result: RefreshResult = {
            "date": date,
            "note_path": note_path,
            "from_cache": False,
            "updated": False,
            "error": None,
        }

        summary_result = self.summary_service.get_summary(
            date, self.api_key, force_refresh
        )
        result["from_cache"] = summary_result["from_cache"]
        summary = summary_result["summary"]
        if summary is None:
            result["error"] = summary_result["error"]
            return result

        box = render_box(summary)

        try:
            if note_path is None:
                note_path = self.note_repository.find_note(date)
                if note_path is None:
                    note_path = self.note_repository.create_note(date)
            result["note_path"] = note_path

            document = self.note_repository.read_note(note_path)
            merged = merge_box(document, box)
            if merged != document:
                self.note_repository.write_note(note_path, merged)
                result["updated"] = True
        except (ConfigError, DocumentMergeError) as e:
            logger.error("unable to update daily note for %s: %s", date, e)
            result["error"] = e
            return result

        logger.info(
            "refreshed daily note %s, from cache: %s, updated: %s",
            note_path,
            result["from_cache"],
            result["updated"],
        )
        return result
