import pytest
from pydantic import ValidationError

from adrkeeper.src.models import AdrAttributes, AdrRecord, TemplateFields


def test_attributes_link_needs_type_and_target():
    assert AdrAttributes(src_adr_name="x", link_type="Amends", tgt_adr_name="0001-a.md").has_link
    assert not AdrAttributes(src_adr_name="x", link_type="Amends").has_link
    assert not AdrAttributes(src_adr_name="x", tgt_adr_name="0001-a.md").has_link


def test_attributes_reject_unknown_fields():
    with pytest.raises(ValidationError):
        AdrAttributes(src_adr_name="x", target="0001-a.md")


def test_template_context_uses_hyphenated_keys():
    fields = TemplateFields(date="d", status="s on d", adr_index="4", adr_name="Name")
    assert fields.to_context() == {"date": "d", "status": "s on d", "adr-index": "4", "adr-name": "Name"}


def test_template_context_includes_links_only_when_set():
    fields = TemplateFields(date="d", status="s", links="Amends [a](a) on d")
    assert fields.to_context() == {"date": "d", "status": "s", "links": "Amends [a](a) on d"}


def test_record_from_filename():
    record = AdrRecord.from_filename("0012-use-postgres.md")
    assert record.index == 12
    assert record.slug == "use-postgres"
    assert record.filename == "0012-use-postgres.md"


def test_record_keeps_name_found_on_disk():
    assert AdrRecord.from_filename("README.md").filename == "README.md"
    unpadded = AdrRecord.from_filename("1-foo.md")
    assert (unpadded.index, unpadded.filename) == (1, "1-foo.md")
    loose = AdrRecord.from_filename("12abc-x.md")
    assert (loose.index, loose.slug, loose.filename) == (12, "x", "12abc-x.md")


def test_record_rejects_negative_index():
    with pytest.raises(ValidationError):
        AdrRecord(index=-1, slug="x", filename="x.md")
