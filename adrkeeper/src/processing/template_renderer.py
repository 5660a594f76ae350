from pathlib import Path

import chevron
from loguru import logger

from ..errors import TemplateNotFoundError
from ..models import TemplateFields


class TemplateRenderer:
    """Renders mustache record templates from a template directory."""

    def __init__(self, template_path: Path):
        self.template_path = Path(template_path)

    def read_template(self, template_name: str) -> str:
        """Read a template from disk; templates are never cached."""
        path = self.template_path / template_name
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(f"[template] cannot read {path}: {exc}")
            raise TemplateNotFoundError(path, str(exc)) from exc

    def render_text(self, template: str, fields: TemplateFields) -> str:
        """Render template text that has already been read."""
        return chevron.render(template, fields.to_context())

    def render(self, template_name: str, fields: TemplateFields) -> str:
        template = self.read_template(template_name)
        logger.debug(f"[template] rendering {template_name} with {sorted(fields.to_context())}")
        return self.render_text(template, fields)
