from stylers.tokens.lexer import lex
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
from stylers.tokens.spacing import join_tokens

__all__ = [
    "lex",
    "join_tokens",
    "Delimiter",
    "Group",
    "Ident",
    "LineColumn",
    "Literal",
    "Punct",
    "Span",
    "TokenTree",
]
