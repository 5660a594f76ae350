from datetime import date
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from ..utils import TextUtils
from .status_section import rewrite_status


class StatusRewriter:
    """Applies status transitions to record files."""

    def __init__(self, date_format: str, today: Callable[[], date] = date.today):
        self.date_format = date_format
        self.today = today

    def formatted_today(self) -> str:
        return TextUtils.format_date(self.today(), self.date_format)

    def rewrite(self, text: str, new_status: str, path: Optional[Path] = None) -> str:
        """Status rewrite of in-memory text, stamped with today's date."""
        return rewrite_status(text, new_status, self.formatted_today(), path)

    def set_status(self, path: Path, new_status: str) -> str:
        """Rewrite the Status section of the record at path and persist it.

        Raises OSError when the file cannot be read or written, and
        StatusSectionNotFoundError when the record has no Status section; in
        both cases the file keeps its previous contents.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        result = self.rewrite(text, new_status, path)
        path.write_text(result, encoding="utf-8")
        logger.info(f"[status] {path.name} -> {new_status}")
        return result
