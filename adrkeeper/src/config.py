import os
from pathlib import Path
from typing import Optional


class Config:
    """Centralized configuration management for adrkeeper."""

    # Layout
    BASE_DIR: Path = Path(os.getenv("ADR_BASE_DIR", "."))
    ADR_PATH: str = os.getenv("ADR_PATH", "doc/adr")
    TEMPLATE_PATH: str = os.getenv("ADR_TEMPLATE_PATH", "doc/adr/templates")

    # Template repository
    TEMPLATE_REPO: Optional[str] = os.getenv("ADR_TEMPLATE_REPO")
    TEMPLATE_BRANCH: str = os.getenv("ADR_TEMPLATE_BRANCH", "HEAD")
    SYNC_TIMEOUT: int = int(os.getenv("ADR_SYNC_TIMEOUT", "120"))

    # Template file names
    RECORD_TEMPLATE: str = "index-recordname.md"
    ROOT_TEMPLATE: str = "0000-record-architecture-decisions.md"

    # Records
    DATE_FORMAT: str = os.getenv("ADR_DATE_FORMAT", "%A, %B %-d, %Y")
    DEFAULT_STATUS: str = os.getenv("ADR_DEFAULT_STATUS", "Accepted")

    # Logging
    LOG_FILE: Optional[str] = os.getenv("ADR_LOG_FILE")
    LOG_LEVEL: str = os.getenv("ADR_LOG_LEVEL", "INFO")

    @classmethod
    def records_dir(cls) -> Path:
        """Records directory resolved against the base directory."""
        return cls.BASE_DIR / cls.ADR_PATH

    @classmethod
    def templates_dir(cls) -> Path:
        """Template directory resolved against the base directory."""
        return cls.BASE_DIR / cls.TEMPLATE_PATH
