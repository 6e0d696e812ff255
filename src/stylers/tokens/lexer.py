"""Lark-based lexer turning inline style source into token trees."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from stylers.errors import LexError
from stylers.tokens.model import (
    Delimiter,
    Group,
    Ident,
    LineColumn,
    Literal,
    Punct,
    Span,
    TokenTree,
)

__all__ = ["lex"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _span(start: Token, end: Token) -> Span:
    return Span(
        start=LineColumn(start.line, start.column),  # type: ignore[arg-type]
        end=LineColumn(end.end_line, end.end_column),  # type: ignore[arg-type]
    )


class TokenTreeTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into :mod:`stylers.tokens.model` objects."""

    def IDENT(self, token: Token) -> Ident:
        return Ident(str(token), _span(token, token))

    def NUMBER(self, token: Token) -> Literal:
        return Literal(str(token), _span(token, token))

    def STRING(self, token: Token) -> Literal:
        return Literal(str(token), _span(token, token))

    def PUNCT(self, token: Token) -> Punct:
        return Punct(str(token), _span(token, token))

    def group(self, items: list[object]) -> Group:
        open_token, *inner, close_token = items
        return Group(
            delimiter=Delimiter.from_open(str(open_token)),
            tokens=tuple(inner),  # type: ignore[arg-type]
            span=_span(open_token, close_token),  # type: ignore[arg-type]
        )

    def start(self, items: list[TokenTree]) -> list[TokenTree]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        keep_all_tokens=True,
    )


def lex(source: str) -> list[TokenTree]:
    """Split *source* into token trees with 1-based line/column spans.

    Comments are dropped. Unbalanced brackets raise :class:`LexError`.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise LexError(str(e), line=line, column=column) from e
    return TokenTreeTransformer().transform(tree)
