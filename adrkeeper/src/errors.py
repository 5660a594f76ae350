from pathlib import Path
from typing import Optional


class AdrError(RuntimeError):
    """Base class for record lifecycle failures."""


class StatusSectionNotFoundError(AdrError):
    """Raised when a record has no recognizable Status section."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(f"No '## Status' section with a 'Status:' line found{where}")


class TemplateNotFoundError(AdrError):
    """Raised when a record template cannot be read."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"Template not readable {path}{detail}")
