"""Data model for directive metadata extracted from source files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Set, Tuple, Any


@dataclass(frozen=True)
class Metadata:
    """
    Directive metadata of a single source text.

    Attributes:
        imports: Import paths in source order, duplicates kept.
        solidity: Raw values of ``pragma solidity`` directives in source order.
    """

    imports: Tuple[str, ...] = ()
    solidity: Tuple[str, ...] = ()

    def __post_init__(self):
        # Stored as tuples; any iterable of strings is accepted
        object.__setattr__(self, "imports", tuple(self.imports))
        object.__setattr__(self, "solidity", tuple(self.solidity))

    def is_empty(self) -> bool:
        """Check if no directive was found."""
        return not self.imports and not self.solidity

    def to_dict(self) -> Dict[str, List[str]]:
        return {"imports": list(self.imports), "solidity": list(self.solidity)}


class MetadataIndex:
    """
    Metadata for a set of scanned files.

    Files keep the order in which they were added. Files that could not be
    read are tracked separately as failures.
    """
    
    def __init__(self):
        self._entries: Dict[Path, Metadata] = {}
        self._failures: Set[Path] = set()
    
    @property
    def paths(self) -> List[Path]:
        """Return scanned file paths in insertion order."""
        return list(self._entries)
    
    @property
    def failures(self) -> Set[Path]:
        """Return paths that could not be read."""
        return self._failures.copy()
    
    def add(self, path: Path, metadata: Metadata) -> None:
        """Record the metadata of a scanned file."""
        self._failures.discard(path)
        self._entries[path] = metadata
    
    def add_failure(self, path: Path) -> None:
        """Record a file that could not be read."""
        self._entries.pop(path, None)
        self._failures.add(path)
    
    def get(self, path: Path) -> Metadata:
        """Get the metadata of a file, or empty metadata if unknown."""
        return self._entries.get(path, Metadata())
    
    def iter_entries(self, include_empty: bool = True) -> Iterator[Tuple[Path, Metadata]]:
        """
        Iterate over (path, metadata) pairs in insertion order.
        
        Args:
            include_empty: If False, skip files without any directive.
        """
        for path, metadata in self._entries.items():
            if include_empty or not metadata.is_empty():
                yield path, metadata
    
    def all_imports(self) -> List[str]:
        """Distinct import paths across all files, sorted."""
        found: Set[str] = set()
        for metadata in self._entries.values():
            found.update(metadata.imports)
        return sorted(found)
    
    def all_solidity(self) -> List[str]:
        """Distinct solidity pragma values across all files, sorted."""
        found: Set[str] = set()
        for metadata in self._entries.values():
            found.update(value.strip() for value in metadata.solidity)
        return sorted(found)
    
    def to_dict(self, key=str, include_empty: bool = True) -> Dict[str, Any]:
        """
        Build a plain dictionary suitable for serialization.
        
        Args:
            key: Callable turning a path into its display string.
            include_empty: If False, skip files without any directive.
        """
        return {
            "files": {
                key(path): metadata.to_dict()
                for path, metadata in self.iter_entries(include_empty)
            },
            "failures": sorted(key(path) for path in self._failures),
        }
    
    def __len__(self) -> int:
        """Return the number of scanned files."""
        return len(self._entries)
    
    def __contains__(self, path: Path) -> bool:
        return path in self._entries
    
    def __repr__(self) -> str:
        import_count = sum(len(m.imports) for m in self._entries.values())
        pragma_count = sum(len(m.solidity) for m in self._entries.values())
        return f"MetadataIndex(files={len(self._entries)}, imports={import_count}, solidity={pragma_count}, failures={len(self._failures)})"
