"""Metadata extraction for source texts, files and directory trees."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Set, Union

from metadata.model import Metadata, MetadataIndex
from .discovery import iter_files
from .parser import Scanner
from .records import Import, Pragma


LOGGER = logging.getLogger(__name__)

SOLIDITY_PRAGMA = "solidity"


def extract(source: str) -> Metadata:
    """
    Extract import paths and solidity pragma values from source text.

    Values are returned exactly as captured: no trimming, sorting or
    deduplication.

    Args:
        source: Contract source text.

    Returns:
        Metadata with imports and solidity values in source order.
    """
    imports = []
    solidity = []

    for directive in Scanner(source):
        if isinstance(directive, Import):
            imports.append(directive.value)
        elif isinstance(directive, Pragma) and directive.name == SOLIDITY_PRAGMA:
            solidity.append(directive.value)

    return Metadata(imports=tuple(imports), solidity=tuple(solidity))


def read_source(file_path: Path) -> Optional[str]:
    """
    Read a source file as UTF-8 text.

    Args:
        file_path: Path to the file to read.

    Returns:
        File contents, or None if the file cannot be read or decoded.
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Skipping unreadable file %s: %s", file_path, exc)
        return None


def extract_file(file_path: Path) -> Optional[Metadata]:
    """Extract metadata from a file, or return None if it cannot be read."""
    source = read_source(file_path)
    if source is None:
        return None
    return extract(source)


def build_index(
    targets: Union[Path, Iterable[Path]],
    include_ext: Optional[Set[str]] = None,
    exclude_dirs: Optional[Set[str]] = None,
    max_depth: Optional[int] = None,
) -> MetadataIndex:
    """
    Extract metadata from files and directory trees.

    Files given explicitly are scanned whatever their extension;
    directories are walked with ``iter_files``.

    Args:
        targets: A path or several paths to files or directories.
        include_ext: File extensions to scan in directories (default: .sol).
        exclude_dirs: Directory names to exclude.
        max_depth: Maximum directory depth to scan.

    Returns:
        MetadataIndex with one entry per scanned file.
    """
    if isinstance(targets, Path):
        targets = [targets]

    index = MetadataIndex()
    for target in targets:
        if target.is_dir():
            files = iter_files(
                root=target,
                include_ext=include_ext,
                exclude_dirs=exclude_dirs,
                max_depth=max_depth,
            )
        else:
            files = iter([target.resolve()])

        for file_path in files:
            metadata = extract_file(file_path)
            if metadata is None:
                index.add_failure(file_path)
                continue
            LOGGER.debug(
                "%s: %d import(s), %d solidity pragma(s)",
                file_path, len(metadata.imports), len(metadata.solidity),
            )
            index.add(file_path, metadata)

    return index
