"""
Fuzzy scanner for import and pragma directives.

The scanner never builds a syntax tree. It jumps from anchor to anchor
(directive keywords, comment openers, quote marks) and skips everything
else, so braces, parentheses and unknown syntax can never confuse it.
Comments and string literals are consumed by the same recursive call
wherever they appear, which keeps look-alike keywords inside them from
being reported as directives.
"""

from collections import deque
from typing import Deque, Iterator, Optional

from .cursor import Cursor, Match, keyword, literal, Anchor
from .records import (
    DIRECTIVE_TYPES,
    Comment,
    Directive,
    Import,
    Pragma,
    Record,
    Semicolon,
    Span,
    StringLiteral,
)


IMPORT = keyword("import")
PRAGMA = keyword("pragma")
BLOCK_COMMENT = literal("/*")
BLOCK_COMMENT_END = literal("*/")
LINE_COMMENT = literal("//")
LINE_END = Anchor("newline", r"(?=\r?\n)")
DOUBLE_QUOTE = literal('"')
SINGLE_QUOTE = literal("'")
SEMICOLON = literal(";")
IDENTIFIER = Anchor("identifier", r"[A-Za-z0-9$_]+")

TOP_LEVEL_ANCHORS = (IMPORT, PRAGMA, BLOCK_COMMENT, LINE_COMMENT, DOUBLE_QUOTE, SINGLE_QUOTE)
STATEMENT_ANCHORS = TOP_LEVEL_ANCHORS + (SEMICOLON,)
PRAGMA_NAME_ANCHORS = (IMPORT, PRAGMA, BLOCK_COMMENT, LINE_COMMENT, SEMICOLON, IDENTIFIER)

QUOTES = {DOUBLE_QUOTE, SINGLE_QUOTE}
COMMENT_OPENERS = {BLOCK_COMMENT, LINE_COMMENT}
DIRECTIVE_KEYWORDS = {IMPORT, PRAGMA}


class Scanner:
    """
    Pull-based scanner over a single source text.

    Iterating a scanner yields ``Import`` and ``Pragma`` records in source
    order. ``next_record`` exposes the full record stream, including the
    comment, string and semicolon records used while scanning directives.
    """

    def __init__(self, source: str):
        self.source = source
        self.cursor = Cursor(source)
        # Directives that ended an unterminated pragma, reported after it.
        self._pending: Deque[Directive] = deque()

    def __iter__(self) -> Iterator[Directive]:
        return self

    def __next__(self) -> Directive:
        if self._pending:
            return self._pending.popleft()

        while True:
            record = self.next_record()
            if record is None:
                raise StopIteration
            if isinstance(record, DIRECTIVE_TYPES):
                return record

    def next_record(self, include_semicolon: bool = False) -> Optional[Record]:
        """
        Scan to the next anchor and return the record it starts.

        Args:
            include_semicolon: Also stop on ``;`` and report it as a
                ``Semicolon`` record.

        Returns:
            The next record, or None once the end of the source is reached.
        """
        anchors = STATEMENT_ANCHORS if include_semicolon else TOP_LEVEL_ANCHORS
        match = self.cursor.advance_to(anchors)
        if match is None:
            return None
        return self._dispatch(match)

    def _dispatch(self, match: Match) -> Optional[Record]:
        if match.anchor == IMPORT:
            return self._scan_import(match)
        if match.anchor == PRAGMA:
            return self._scan_pragma(match)
        if match.anchor in COMMENT_OPENERS:
            return self._scan_comment(match)
        if match.anchor in QUOTES:
            return self._scan_string(match)
        return Semicolon(Span(match.start, match.end))

    def _scan_comment(self, opener: Match) -> Comment:
        closer = BLOCK_COMMENT_END if opener.anchor == BLOCK_COMMENT else LINE_END
        self.cursor.advance_to((closer,))
        # An unterminated comment runs to the end of the source.
        return Comment(Span(opener.start, self.cursor.offset))

    def _scan_string(self, opener: Match) -> StringLiteral:
        # No escape handling: the literal ends at the next identical quote.
        closer = self.cursor.advance_to((opener.anchor,))
        value_end = closer.start if closer is not None else len(self.source)
        return StringLiteral(
            self.source[opener.end:value_end],
            Span(opener.start, self.cursor.offset),
        )

    def _scan_import(self, keyword_match: Match) -> Optional[Directive]:
        """
        Finish an import directive at its first string literal.

        Whatever sits between the keyword and the path (``{a, b as c}
        from``, ``* as X from``) is skipped. A directive met before any
        string means this import was incomplete, so that directive is
        returned in its place.
        """
        while True:
            record = self.next_record()
            if record is None:
                return None
            if isinstance(record, StringLiteral):
                return Import(record.value, Span(keyword_match.start, record.span.end))
            if isinstance(record, DIRECTIVE_TYPES):
                return record

    def _queue_nested(self, keyword_match: Match) -> None:
        # A directive keyword ends an unterminated pragma; whatever that
        # keyword starts is reported right after the pragma.
        record = self._dispatch(keyword_match)
        if record is not None:
            self._pending.appendleft(record)

    def _scan_pragma(self, keyword_match: Match) -> Pragma:
        start = keyword_match.start
        name_match = self._scan_pragma_name()
        if name_match is None:
            return Pragma("", "", Span(start, len(self.source)))
        if name_match.anchor == SEMICOLON:
            return Pragma("", "", Span(start, name_match.end))
        if name_match.anchor in DIRECTIVE_KEYWORDS:
            self._queue_nested(name_match)
            return Pragma("", "", Span(start, name_match.start))
        name = self.source[name_match.start:name_match.end]

        # The value is the verbatim text up to the terminating semicolon,
        # with comments cut out.
        parts = []
        resume = self.cursor.offset
        while True:
            match = self.cursor.advance_to(STATEMENT_ANCHORS)
            if match is None:
                parts.append(self.source[resume:])
                end = len(self.source)
                break
            if match.anchor in DIRECTIVE_KEYWORDS:
                parts.append(self.source[resume:match.start])
                end = match.start
                self._queue_nested(match)
                break
            record = self._dispatch(match)
            if isinstance(record, Comment):
                parts.append(self.source[resume:record.span.start])
                resume = record.span.end
            elif isinstance(record, Semicolon):
                parts.append(self.source[resume:record.span.start])
                end = record.span.end
                break

        return Pragma(name, "".join(parts), Span(start, end))

    def _scan_pragma_name(self) -> Optional[Match]:
        """
        Find the identifier naming a pragma, skipping comments.

        Returns:
            The identifier match, or the ``;`` or directive keyword that
            came first, or None at the end of the source.
        """
        while True:
            match = self.cursor.advance_to(PRAGMA_NAME_ANCHORS)
            if match is None or match.anchor not in COMMENT_OPENERS:
                return match
            self._scan_comment(match)


def scan(source: str) -> Iterator[Directive]:
    """Iterate over the import and pragma directives of ``source``."""
    return iter(Scanner(source))
