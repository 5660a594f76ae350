"""Utility modules for record naming and filesystem helpers."""

from .file_utils import ensure_directory, get_adr_files
from .text_utils import TextUtils

__all__ = ["TextUtils", "ensure_directory", "get_adr_files"]
