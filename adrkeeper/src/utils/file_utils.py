from pathlib import Path
from typing import List

from loguru import logger


def get_adr_files(adr_path: Path) -> List[str]:
    """Sorted markdown filenames directly inside the records directory."""
    adr_path = Path(adr_path)
    if not adr_path.is_dir():
        logger.warning(f"[adr] records directory missing: {adr_path}")
        return []
    return sorted(
        p.name
        for p in adr_path.iterdir()
        if p.is_file() and p.suffix == ".md" and not p.name.startswith(".")
    )


def ensure_directory(path: Path) -> Path:
    """Create a directory and its parents if needed."""
    path = Path(path)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info(f"[adr] created directory {path}")
    return path
