"""File discovery utilities for scanning contract trees."""

from pathlib import Path
from typing import Iterator, Set, Optional


DEFAULT_EXTENSIONS = {".sol"}
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    "node_modules", "__pycache__",
    "venv", ".venv",
    ".idea", ".vscode",
    "artifacts", "cache", "out",
    "build", "dist",
}


def iter_files(
    root: Path,
    include_ext: Optional[Set[str]] = None,
    exclude_dirs: Optional[Set[str]] = None,
    max_depth: Optional[int] = None,
) -> Iterator[Path]:
    """
    Iterate over source files in a directory tree.
    
    Args:
        root: Root directory to scan.
        include_ext: Set of file extensions to include (e.g., {'.sol'}).
                    If None, uses DEFAULT_EXTENSIONS.
        exclude_dirs: Set of directory names to skip. Entries starting
                     with '*' match by suffix. If None, uses DEFAULT_EXCLUDE_DIRS.
        max_depth: Maximum depth to descend. None means unlimited.
    
    Yields:
        Path objects for matching files, sorted within each directory.
    """
    if include_ext is None:
        include_ext = DEFAULT_EXTENSIONS
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS
    
    root = root.resolve()
    suffix_patterns = [pat.lstrip("*") for pat in exclude_dirs if pat.startswith("*")]
    
    def _walk(current: Path, depth: int) -> Iterator[Path]:
        if max_depth is not None and depth > max_depth:
            return
        
        try:
            entries = sorted(current.iterdir())
        except PermissionError:
            return
        
        for entry in entries:
            if entry.is_dir():
                if entry.name in exclude_dirs:
                    continue
                if any(entry.name.endswith(suffix) for suffix in suffix_patterns):
                    continue
                yield from _walk(entry, depth + 1)
            elif entry.is_file():
                if entry.suffix.lower() in include_ext:
                    yield entry
    
    yield from _walk(root, 0)

