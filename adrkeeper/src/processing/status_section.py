"""Locate and rewrite the Status section of a record.

Records are treated as opaque text. The only structure recognized is the
region starting at a '## Status' heading and ending with the last
'Status: <label>' line after it, plus any trailing whitespace:

    ## Status

    Status: Accepted on Monday, October 19, 2026

Everything between the heading and the status line is kept verbatim. The
pattern is shared with existing record files, so its shape must not change:
the body is greedy (the last capitalized 'Status: ' wins) and the label only
spans word characters, spaces, tabs and commas.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple, Optional

from ..errors import StatusSectionNotFoundError

STATUS_SECTION_RE = re.compile(r"## Status([\s\S]+)Status: ([\w \t,]*)\s*", re.ASCII)


class StatusSection(NamedTuple):
    start: int
    end: int
    preamble: str
    status: str


def locate_status_section(text: str, path: Optional[Path] = None) -> StatusSection:
    """Find the Status section or raise StatusSectionNotFoundError."""
    match = STATUS_SECTION_RE.search(text)
    if match is None:
        raise StatusSectionNotFoundError(path)
    return StatusSection(match.start(), match.end(), match.group(1), match.group(2))


def _replace_section(text: str, section: StatusSection, body: str) -> str:
    return f"{text[:section.start]}## Status{section.preamble}{body}{text[section.end:]}"


def rewrite_status(text: str, new_status: str, on: str, path: Optional[Path] = None) -> str:
    """Make new_status current and demote the old line to 'Previous status'."""
    section = locate_status_section(text, path)
    body = f"Status: {new_status} on {on}\nPrevious status: {section.status}  \n"
    return _replace_section(text, section, body)


def append_link(text: str, link_line: str, path: Optional[Path] = None) -> str:
    """Insert a link annotation right after the current status line."""
    section = locate_status_section(text, path)
    body = f"Status: {section.status}  \n{link_line}\n"
    return _replace_section(text, section, body)


__all__ = [
    "STATUS_SECTION_RE",
    "StatusSection",
    "locate_status_section",
    "rewrite_status",
    "append_link",
]
