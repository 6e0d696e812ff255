"""Rebuild source text from token trees.

Tokens do not carry the whitespace between them. With spans, one space is
put wherever two tokens are separated in the source (a column gap or a
line break). Without spans a heuristic applies: a space goes only between
two word-like tokens (``div p``, ``1px solid``), which loses a descendant
space before ``.``, ``#`` or ``:``.
"""

from __future__ import annotations

from collections.abc import Iterable

from stylers.tokens.model import Group, Ident, Literal, Punct, Span, TokenTree

__all__ = ["join_tokens", "render"]


def join_tokens(tokens: Iterable[TokenTree], positions: bool = True) -> str:
    """Concatenate *tokens* into text, reconstructing inter-token spacing."""
    parts: list[str] = []
    previous: TokenTree | None = None
    for token in tokens:
        if previous is not None and _needs_space(previous, token, positions):
            parts.append(" ")
        parts.append(render(token, positions))
        previous = token
    return "".join(parts)


def render(token: TokenTree, positions: bool = True) -> str:
    if isinstance(token, Group):
        delimiter = token.delimiter
        return delimiter.open + join_tokens(token.tokens, positions) + delimiter.close
    if isinstance(token, Punct):
        return token.char
    return token.text


def _needs_space(previous: TokenTree, current: TokenTree, positions: bool) -> bool:
    if positions and previous.span is not None and current.span is not None:
        return _separated(previous.span, current.span)
    return _ends_word(previous) and isinstance(current, (Ident, Literal))


def _separated(previous: Span, current: Span) -> bool:
    end, start = previous.end, current.start
    return start.line != end.line or start.column > end.column


def _ends_word(token: TokenTree) -> bool:
    if isinstance(token, Group):
        return not token.is_brace
    return isinstance(token, (Ident, Literal))
