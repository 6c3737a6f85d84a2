"""Records produced by the fuzzy scanner."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of offsets into the source."""

    start: int
    end: int


@dataclass(frozen=True)
class Import:
    """An ``import`` directive; ``value`` is the quoted path."""

    value: str
    span: Span


@dataclass(frozen=True)
class Pragma:
    """A ``pragma`` directive with its name and raw value text."""

    name: str
    value: str
    span: Span


@dataclass(frozen=True)
class Comment:
    span: Span


@dataclass(frozen=True)
class StringLiteral:
    value: str
    span: Span


@dataclass(frozen=True)
class Semicolon:
    span: Span


Record = Union[Import, Pragma, Comment, StringLiteral, Semicolon]
Directive = Union[Import, Pragma]

DIRECTIVE_TYPES = (Import, Pragma)
