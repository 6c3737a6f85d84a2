"""YAML exporter for metadata indexes."""

from pathlib import Path
from typing import Optional

import yaml

from metadata.model import MetadataIndex
from .json_exporter import get_path_str


def to_yaml(
    index: MetadataIndex,
    root: Path,
    base: Optional[Path] = None,
    include_empty: bool = True,
) -> str:
    """
    Convert a metadata index to YAML.
    
    Pragma values are emitted verbatim, so leading whitespace is kept
    by quoting where YAML requires it.
    """
    if base is None:
        base = root
    
    data = index.to_dict(
        key=lambda path: get_path_str(path, base, root),
        include_empty=include_empty,
    )
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
