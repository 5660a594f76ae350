from datetime import date
from pathlib import Path
from typing import List

import pytest
from loguru import logger

from adrkeeper.src.processing import AdrLifecycle

FIXED_DAY = date(2026, 10, 19)
FIXED_DAY_TEXT = "Monday, October 19, 2026"
DATE_FORMAT = "%A, %B %-d, %Y"

RECORD_TEMPLATE = """# {{adr-index}}. {{adr-name}}

Date: {{date}}

## Status

Status: {{status}}
{{#links}}
{{links}}
{{/links}}

## Context

What is the issue that we're seeing?
"""

ROOT_TEMPLATE = """# 0. Record architecture decisions

Date: {{date}}

## Status

Status: {{status}}

## Context

We need to record the architectural decisions made on this project.
"""


@pytest.fixture
def log_messages() -> List[str]:
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    (path / "index-recordname.md").write_text(RECORD_TEMPLATE, encoding="utf-8")
    (path / "0000-record-architecture-decisions.md").write_text(ROOT_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def adr_dir(tmp_path: Path) -> Path:
    path = tmp_path / "adr"
    path.mkdir()
    return path


@pytest.fixture
def lifecycle(adr_dir: Path, template_dir: Path) -> AdrLifecycle:
    return AdrLifecycle(adr_dir, template_dir, DATE_FORMAT, today=lambda: FIXED_DAY)


@pytest.fixture
def today_text() -> str:
    return FIXED_DAY_TEXT
