"""Anchor-based cursor over a source string."""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple


IDENTIFIER_CHARS = r"A-Za-z0-9_$"


@dataclass(frozen=True)
class Anchor:
    """
    A named pattern the cursor can stop on.

    Attributes:
        name: Identifier used when dispatching on a match.
        pattern: Regular expression fragment matching the anchor text.
    """

    name: str
    pattern: str


def literal(text: str, name: Optional[str] = None) -> Anchor:
    """Build an anchor matching ``text`` exactly."""
    return Anchor(name or text, re.escape(text))


def keyword(text: str) -> Anchor:
    """
    Build an anchor matching ``text`` only as a whole word.

    The keyword must not be preceded or followed by an identifier
    character, so ``important`` never matches the ``import`` keyword.
    """
    return Anchor(
        text,
        rf"(?<![{IDENTIFIER_CHARS}]){re.escape(text)}(?![{IDENTIFIER_CHARS}])",
    )


@dataclass(frozen=True)
class Match:
    """A successful anchor search: which anchor, and where."""

    anchor: Anchor
    start: int
    end: int


@lru_cache(maxsize=32)
def _compile(anchors: Tuple[Anchor, ...]) -> "re.Pattern[str]":
    # One group per anchor; regex alternation keeps the leftmost match
    # and, at equal positions, the first-listed alternative.
    return re.compile(
        "|".join(f"(?P<a{i}>{anchor.pattern})" for i, anchor in enumerate(anchors))
    )


class Cursor:
    """
    A monotonically advancing offset into a source string.

    The only movement primitive is ``advance_to``. Once the offset reaches
    the end of the source no anchor can match again.
    """

    def __init__(self, source: str, offset: int = 0):
        self.source = source
        self._offset = min(max(offset, 0), len(source))

    @property
    def offset(self) -> int:
        """Current position in the source."""
        return self._offset

    @property
    def at_end(self) -> bool:
        """True when nothing is left to scan."""
        return self._offset >= len(self.source)

    def advance_to(self, anchors: Sequence[Anchor]) -> Optional[Match]:
        """
        Move past the earliest occurrence of any anchor.

        Args:
            anchors: Candidate anchors, in tie-breaking order.

        Returns:
            The match, or None if no anchor occurs in the remaining text,
            in which case the offset is moved to the end of the source.
        """
        if self.at_end or not anchors:
            self._offset = len(self.source)
            return None

        anchors = tuple(anchors)
        found = _compile(anchors).search(self.source, self._offset)
        if found is None:
            self._offset = len(self.source)
            return None

        anchor = anchors[int(found.lastgroup[1:])]
        self._offset = found.end()
        return Match(anchor, found.start(), found.end())

    def __repr__(self) -> str:
        return f"Cursor(offset={self._offset}, length={len(self.source)})"
