from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from ..config import Config
from ..errors import StatusSectionNotFoundError
from ..models import AdrAttributes, AdrRecord, TemplateFields
from ..services import TemplateRepositorySync
from ..utils import TextUtils, ensure_directory, get_adr_files
from .index_allocator import IndexAllocator
from .link_manager import LinkManager
from .status_rewriter import StatusRewriter
from .template_renderer import TemplateRenderer


class AdrLifecycle:
    """Top-level record operations over one records directory."""

    def __init__(
        self,
        adr_path: Path,
        template_path: Path,
        date_format: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        self.adr_path = Path(adr_path)
        self.template_path = Path(template_path)
        self.date_format = date_format or Config.DATE_FORMAT
        self.today = today
        self.allocator = IndexAllocator(self.adr_path)
        self.renderer = TemplateRenderer(self.template_path)
        self.status_rewriter = StatusRewriter(self.date_format, today)
        self.link_manager = LinkManager(self.status_rewriter)

    def get_all_adr(self) -> List[str]:
        return get_adr_files(self.adr_path)

    def list_records(self) -> List[AdrRecord]:
        return [AdrRecord.from_filename(name) for name in self.get_all_adr()]

    def create_new_adr(self, attributes: AdrAttributes) -> Path:
        """Create the next record from the record template and return its path.

        The template is read before anything is written. When a link is
        requested the target is then updated with the reciprocal phrase; if
        that fails nothing new is written.
        """
        logger.info(
            f"[adr] create new adr {attributes.src_adr_name} in {self.adr_path} "
            f"from templatepath {self.template_path}"
        )
        index = self.allocator.next_index()
        on = TextUtils.format_date(self.today(), self.date_format)
        filename = TextUtils.record_filename(index, attributes.src_adr_name)
        fields = TemplateFields(
            date=on,
            status=f"{attributes.status} on {on}",
            adr_index=str(index),
            adr_name=attributes.src_adr_name,
        )
        template = self.renderer.read_template(Config.RECORD_TEMPLATE)

        if attributes.has_link:
            fields.links = TextUtils.link_line(attributes.link_type, attributes.tgt_adr_name, on)
            linked_type = TextUtils.reciprocal_link_type(attributes.link_type)
            self.link_manager.add_link(filename, self.adr_path / attributes.tgt_adr_name, linked_type)

        output = self.renderer.render_text(template, fields)
        path = ensure_directory(self.adr_path) / filename
        path.write_text(output, encoding="utf-8")
        logger.info(f"[adr] wrote {path}")
        return path

    def change_status(self, adr_file_path: Path, status: str) -> bool:
        """Move a record to a new status; failures are logged, not raised."""
        try:
            self.status_rewriter.set_status(adr_file_path, status)
        except OSError as exc:
            logger.error(f"[status] cannot update {adr_file_path}: {exc}")
            return False
        except StatusSectionNotFoundError as exc:
            logger.error(f"[status] left {adr_file_path} unchanged: {exc}")
            return False
        return True

    def add_link(self, src_adr_name: str, tgt_file_path: Path, link_type: str) -> str:
        return self.link_manager.add_link(src_adr_name, tgt_file_path, link_type)

    def write_root_record(self) -> Path:
        """Render the '0000' record that documents the use of ADRs."""
        on = TextUtils.format_date(self.today(), self.date_format)
        fields = TemplateFields(date=on, status=f"Accepted on {on}")
        output = self.renderer.render(Config.ROOT_TEMPLATE, fields)
        path = self.adr_path / Config.ROOT_TEMPLATE
        path.write_text(output, encoding="utf-8")
        logger.info(f"[init] wrote {path}")
        return path


def init(
    base_dir: Path,
    adr_path: str,
    template_path: str,
    git_repo: Optional[str],
    date_format: Optional[str] = None,
    sync: Optional[TemplateRepositorySync] = None,
) -> Path:
    """Prepare a records directory under base_dir and write its first record.

    The template repository is cloned or refreshed first. A failed sync is
    only logged; rendering then fails if the root template is missing.
    """
    base_dir = Path(base_dir)
    lifecycle = AdrLifecycle(base_dir / adr_path, base_dir / template_path, date_format)
    ensure_directory(lifecycle.adr_path)

    if git_repo:
        (sync or TemplateRepositorySync()).sync(lifecycle.template_path, git_repo)
    else:
        logger.warning("[init] no template repository configured; using templates on disk")

    return lifecycle.write_root_record()
