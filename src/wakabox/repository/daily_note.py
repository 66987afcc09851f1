# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from wakabox import time
from wakabox.error import ConfigError, DocumentMergeError
from wakabox.log import get_logger

logger = get_logger(__name__)


class DailyNoteRepository:
    """Markdown daily notes named by a pendulum format string inside one folder."""

    def __init__(self, notes_path: Optional[Path], filename_format: str) -> None:
        self._notes_path = notes_path
        self.filename_format = filename_format

    @property
    def notes_path(self) -> Path:
        if self._notes_path is None:
            raise ConfigError(
                "No notes folder configured. Use: wakabox config set --notes-path <path>"
            )
        return self._notes_path

    def get_note_path(self, date: str) -> Path:
        filename = time.date_from_str(date).format(self.filename_format)
        return self.notes_path / f"{filename}.md"

    def find_note(self, date: str) -> Optional[Path]:
        path = self.get_note_path(date)
        if path.is_file():
            return path
        return None

    def create_note(self, date: str) -> Path:
        path = self.get_note_path(date)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            raise DocumentMergeError(f"unable to create daily note {path}: {e}") from e
        logger.info("created daily note %s", path)
        return path

    def read_note(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentMergeError(f"unable to read daily note {path}: {e}") from e

    def write_note(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DocumentMergeError(f"unable to write daily note {path}: {e}") from e
