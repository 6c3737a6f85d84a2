#!/usr/bin/env python3
"""
Solidity Metadata CLI

A tool for listing the import paths and `pragma solidity` version
constraints of contract sources, without compiling or fully parsing them.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Set

from scanner.builder import build_index
from scanner.discovery import DEFAULT_EXCLUDE_DIRS
from exporters import to_ascii, to_json, to_yaml


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="solmeta",
        description="List import paths and solidity pragmas of contract sources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  solmeta .                           # Scan current directory, ASCII output
  solmeta contracts/Token.sol         # Scan a single file
  solmeta . -f json -o meta.json      # JSON output to file
  solmeta . -f yaml --hide-empty      # YAML, only files with directives
  solmeta . --exclude-dir mocks       # Skip an extra directory name
        """,
    )

    # Positional arguments
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to scan (default: current directory)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["ascii", "json", "yaml"],
        default="ascii",
        help="Output format (default: ascii)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=["tree", "ascii"],
        default="tree",
        help="ASCII output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    # Scanning options
    parser.add_argument(
        "--include-ext",
        nargs="+",
        default=None,
        help="File extensions to scan in directories (default: .sol)",
    )

    parser.add_argument(
        "--exclude-dir",
        nargs="+",
        default=None,
        help="Additional directory names to exclude",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum directory depth to scan",
    )

    parser.add_argument(
        "--relative-to",
        type=str,
        default=None,
        help="Base path for relative path display",
    )

    parser.add_argument(
        "--hide-empty",
        action="store_true",
        help="Hide files that contain no import or solidity pragma",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress information to stderr",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.INFO if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Resolve paths
    targets: List[Path] = []
    for raw in parsed.paths:
        target = Path(raw).resolve()
        if not target.exists():
            print(f"Error: '{raw}' does not exist", file=sys.stderr)
            return 1
        targets.append(target)

    # Display paths relative to the first directory given, or the cwd
    root = next((t for t in targets if t.is_dir()), Path.cwd().resolve())
    base = Path(parsed.relative_to).resolve() if parsed.relative_to else root

    # Prepare scanning options
    include_ext: Optional[Set[str]] = None
    if parsed.include_ext:
        include_ext = set()
        for ext in parsed.include_ext:
            if not ext.startswith("."):
                ext = "." + ext
            include_ext.add(ext.lower())

    exclude_dirs: Optional[Set[str]] = None
    if parsed.exclude_dir:
        exclude_dirs = set(parsed.exclude_dir) | DEFAULT_EXCLUDE_DIRS

    index = build_index(
        targets,
        include_ext=include_ext,
        exclude_dirs=exclude_dirs,
        max_depth=parsed.max_depth,
    )
    logging.getLogger(__name__).info("Scanned %d file(s)", len(index))

    include_empty = not parsed.hide_empty

    # Generate output
    if parsed.format == "json":
        output = to_json(index, root=root, base=base, include_empty=include_empty)
    elif parsed.format == "yaml":
        output = to_yaml(index, root=root, base=base, include_empty=include_empty)
    else:  # ascii (default)
        output = to_ascii(
            index,
            root=root,
            base=base,
            style=parsed.ascii_style,
            include_empty=include_empty,
        )

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
