"""Fuzzy scanner extracting import and pragma directives from contract sources."""

from .cursor import Cursor
from .parser import Scanner, scan
from .builder import extract, extract_file, build_index
from .discovery import iter_files

__all__ = [
    "Cursor",
    "Scanner",
    "scan",
    "extract",
    "extract_file",
    "build_index",
    "iter_files",
]
