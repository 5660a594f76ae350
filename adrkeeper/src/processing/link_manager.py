from pathlib import Path

from loguru import logger

from ..utils import TextUtils
from .status_rewriter import StatusRewriter
from .status_section import append_link

SUPERSEDED_BY = "Superseded by"
SUPERSEDED = "Superseded"


class LinkManager:
    """Writes link annotations into the Status section of a target record.

    'Superseded by' is special: the target's status is first moved to
    'Superseded', then the link line is added under the new status.
    """

    def __init__(self, status_rewriter: StatusRewriter):
        self.status_rewriter = status_rewriter

    def add_link(self, src_adr_name: str, tgt_file_path: Path, link_type: str) -> str:
        tgt_file_path = Path(tgt_file_path)
        logger.info(f"[link] add link {link_type} {src_adr_name} to {tgt_file_path}")

        # Single write after both transforms; on failure the target is untouched.
        text = tgt_file_path.read_text(encoding="utf-8")
        if link_type == SUPERSEDED_BY:
            text = self.status_rewriter.rewrite(text, SUPERSEDED, tgt_file_path)

        on = self.status_rewriter.formatted_today()
        line = TextUtils.link_line(link_type, src_adr_name, on)
        result = append_link(text, line, tgt_file_path)
        tgt_file_path.write_text(result, encoding="utf-8")
        return result
