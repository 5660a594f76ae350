import re
from datetime import date
from typing import Optional

_LEADING_INT_RE = re.compile(r"\s*\+?(\d+)")


class TextUtils:
    """Utility class for record naming and text formatting."""

    @staticmethod
    def sanitize_adr_name(adr_name: str) -> str:
        """Turn a typed title into a filename slug.

        Only the first apostrophe is replaced; later ones are kept as typed.
        """
        return adr_name.lower().replace(" ", "-").replace("'", "-", 1)

    @staticmethod
    def record_filename(index: int, adr_name: str) -> str:
        """Build '<zero-padded index>-<slug>.md'."""
        return f"{str(index).zfill(4)}-{TextUtils.sanitize_adr_name(adr_name)}.md"

    @staticmethod
    def parse_index_prefix(filename: str) -> Optional[int]:
        """Leading integer of the segment before the first hyphen, if any."""
        match = _LEADING_INT_RE.match(filename.split("-", 1)[0])
        return int(match.group(1)) if match else None

    @staticmethod
    def reciprocal_link_type(link_type: str) -> str:
        """Derive the phrase written on the link target.

        'Supersedes' -> 'Superseded by', 'Amends' -> 'Amended by'.
        """
        trimmed = link_type.strip()
        if trimmed.endswith("es"):
            return re.sub(r"es$", "ed by", trimmed)
        return re.sub(r"s$", "ed by", link_type)

    @staticmethod
    def link_line(link_type: str, adr_filename: str, on: str) -> str:
        """Markdown link annotation as written inside a Status section."""
        return f"{link_type} [{adr_filename}]({adr_filename}) on {on}"

    @staticmethod
    def format_date(moment: date, date_format: str) -> str:
        """strftime with a portable '%-d' (day of month without padding)."""
        return moment.strftime(date_format.replace("%-d", str(moment.day)))
