"""JSON exporter for metadata indexes (machine-friendly format)."""

import json
from pathlib import Path
from typing import Optional

from metadata.model import MetadataIndex


def to_json(
    index: MetadataIndex,
    root: Path,
    base: Optional[Path] = None,
    indent: int = 2,
    include_empty: bool = True,
) -> str:
    """
    Convert a metadata index to JSON format.
    
    Args:
        index: The metadata index to export.
        root: Scan root for relative paths.
        base: Optional base path for relative path display.
        indent: JSON indentation level.
        include_empty: If True, include files without any directive.
    
    Returns:
        JSON string with a "files" mapping and a "failures" list.
    """
    if base is None:
        base = root
    
    data = index.to_dict(
        key=lambda path: get_path_str(path, base, root),
        include_empty=include_empty,
    )
    return json.dumps(data, indent=indent)


def get_path_str(path: Path, base: Path, root: Path) -> str:
    """Get the display string of a path, relative to base or root when possible."""
    try:
        rel_path = path.resolve().relative_to(base.resolve())
        return str(rel_path).replace("\\", "/")
    except ValueError:
        try:
            rel_path = path.resolve().relative_to(root.resolve())
            return str(rel_path).replace("\\", "/")
        except ValueError:
            return str(path).replace("\\", "/")
