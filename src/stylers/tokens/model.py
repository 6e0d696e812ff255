"""Token-tree model for inline style source.

Identifiers, literals and single punctuation characters, plus groups
enclosed in ``()``, ``[]`` or ``{}``. Spans are optional: tokens built by
hand (in tests, or by callers with no source text) carry none.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class LineColumn:
    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """Source range of a token; ``end`` is the position just past it."""

    start: LineColumn
    end: LineColumn


class Delimiter(Enum):
    """Bracket pair enclosing a :class:`Group`."""

    PARENTHESIS = "()"
    BRACKET = "[]"
    BRACE = "{}"

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    @classmethod
    def from_open(cls, char: str) -> Delimiter:
        for delimiter in cls:
            if delimiter.open == char:
                return delimiter
        raise ValueError(f"Not an opening delimiter: {char!r}")


@dataclass(frozen=True)
class Ident:
    text: str
    span: Span | None = None


@dataclass(frozen=True)
class Literal:
    """A number (with any unit suffix) or a quoted string, quotes included."""

    text: str
    span: Span | None = None


@dataclass(frozen=True)
class Punct:
    char: str
    span: Span | None = None

    @property
    def text(self) -> str:
        return self.char


@dataclass(frozen=True)
class Group:
    delimiter: Delimiter
    tokens: tuple[TokenTree, ...] = ()
    span: Span | None = None

    @property
    def is_brace(self) -> bool:
        return self.delimiter is Delimiter.BRACE


TokenTree = Union[Ident, Literal, Punct, Group]
