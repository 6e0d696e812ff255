"""Scoped stylesheet engine: string and token-stream entry points."""

from __future__ import annotations

from collections.abc import Iterable

from stylers.class_name import Class
from stylers.style.declaration import StyleDeclaration
from stylers.style.rules import AtRule, Rule, StyleRule
from stylers.style.selector import rewrite_selector
from stylers.style.stylesheet import (
    Stylesheet,
    split_rules,
    split_token_rules,
    strip_comments,
    validate_braces,
)
from stylers.tokens.model import TokenTree

__all__ = [
    "from_str",
    "from_tokens",
    "rewrite_selector",
    "split_rules",
    "split_token_rules",
    "strip_comments",
    "validate_braces",
    "AtRule",
    "Rule",
    "StyleDeclaration",
    "StyleRule",
    "Stylesheet",
]


def from_str(text: str, class_: Class) -> str:
    """Scope a whole stylesheet text and return the css."""
    stylesheet, _ = Stylesheet.from_str(text, class_)
    return stylesheet.css_text()


def from_tokens(
    tokens: Iterable[TokenTree], class_: Class, positions: bool = True
) -> tuple[str, set[str]]:
    """Scope a token stream.

    Returns the css and the raw compound selectors, which the markup side
    uses to decide which elements receive the class. Pass
    ``positions=False`` for tokens without reliable spans.
    """
    stylesheet, selectors = Stylesheet.from_tokens(tokens, class_, positions)
    return stylesheet.css_text(), selectors
