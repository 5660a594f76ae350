from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import Config
from .utils.text_utils import TextUtils


class AdrAttributes(BaseModel):
    model_config = ConfigDict(extra='forbid')

    src_adr_name: str = Field(..., description="Human-readable title of the record to create")
    status: str = Field(default_factory=lambda: Config.DEFAULT_STATUS, description="Initial status label")
    link_type: Optional[str] = Field(None, description="Forward link phrase, e.g. 'Amends' or 'Supersedes'")
    tgt_adr_name: Optional[str] = Field(None, description="Filename of the existing record to link to")

    @property
    def has_link(self) -> bool:
        return self.link_type is not None and self.tgt_adr_name is not None


class TemplateFields(BaseModel):
    model_config = ConfigDict(extra='forbid')

    date: str = Field(..., description="Formatted creation date")
    status: str = Field(..., description="Status line value, '<status> on <date>'")
    adr_index: Optional[str] = Field(None, description="Unpadded record index")
    adr_name: Optional[str] = Field(None, description="Human-readable record title")
    links: Optional[str] = Field(None, description="Rendered forward link line")

    def to_context(self) -> Dict[str, str]:
        """Mustache data using the placeholder names found in record templates."""
        context = {"date": self.date, "status": self.status}
        if self.adr_index is not None:
            context["adr-index"] = self.adr_index
        if self.adr_name is not None:
            context["adr-name"] = self.adr_name
        if self.links is not None:
            context["links"] = self.links
        return context


class AdrRecord(BaseModel):
    model_config = ConfigDict(extra='forbid')

    index: int = Field(..., ge=0, description="Numeric filename prefix")
    slug: str = Field(..., description="Sanitized title part of the filename")
    filename: str = Field(..., description="Name of the file as found on disk")

    @classmethod
    def from_filename(cls, name: str) -> "AdrRecord":
        """Parse a listed filename; an unparsable prefix counts as index 0."""
        stem = name[:-3] if name.endswith(".md") else name
        index = TextUtils.parse_index_prefix(stem)
        if index is None:
            return cls(index=0, slug=stem, filename=name)
        return cls(index=index, slug=stem.partition("-")[2], filename=name)
