from pathlib import Path

from loguru import logger

from ..utils import TextUtils, get_adr_files


class IndexAllocator:
    """Hands out record indices from the filenames already on disk."""

    def __init__(self, adr_path: Path):
        self.adr_path = Path(adr_path)

    def last_index(self) -> int:
        """Highest numeric prefix; -1 when there are no records at all.

        Files whose prefix is not a number count as index 0.
        """
        last = -1
        for filename in get_adr_files(self.adr_path):
            index = TextUtils.parse_index_prefix(filename)
            last = max(last, index if index is not None else 0)
        return last

    def next_index(self) -> int:
        index = self.last_index() + 1
        logger.debug(f"[adr] next index {index} in {self.adr_path}")
        return index
