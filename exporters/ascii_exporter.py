"""ASCII tree-style exporter for metadata indexes."""

from pathlib import Path
from typing import Optional, List, Tuple

from metadata.model import Metadata, MetadataIndex
from .json_exporter import get_path_str


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "


def to_ascii(
    index: MetadataIndex,
    root: Path,
    base: Optional[Path] = None,
    style: str = "tree",
    include_empty: bool = True,
) -> str:
    """
    Convert a metadata index to an ASCII tree, one tree per file.

    Args:
        index: The metadata index to export.
        root: Scan root for relative paths.
        base: Optional base path for relative path display.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).
        include_empty: If True, list files without any directive.

    Returns:
        ASCII tree string.
    """
    if base is None:
        base = root

    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST)

    blocks: List[str] = []
    for path, metadata in index.iter_entries(include_empty):
        lines = [get_path_str(path, base, root)]
        _render_metadata(metadata, chars, lines)
        blocks.append("\n".join(lines))

    for path in sorted(index.failures):
        blocks.append(f"{get_path_str(path, base, root)} [UNREADABLE]")

    # Blank line between file trees
    return "\n\n".join(blocks)


def _render_metadata(
    metadata: Metadata,
    chars: Tuple[str, str],
    lines: List[str],
) -> None:
    """Append one leaf per import and solidity pragma, in source order."""
    branch, last = chars

    leaves = [f"import {path}" for path in metadata.imports]
    # Captured values keep their surrounding whitespace; trim for display only
    leaves.extend(f"pragma solidity {value.strip()}" for value in metadata.solidity)

    for i, leaf in enumerate(leaves):
        connector = last if i == len(leaves) - 1 else branch
        lines.append(f"{connector}{leaf}")
