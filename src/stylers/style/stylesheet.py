"""Stylesheet: comment stripping, rule splitting and the ordered rule list.

Rule order is preserved everywhere: later rules of equal specificity win
in CSS, so nothing here reorders or deduplicates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from stylers.class_name import Class
from stylers.errors import UnbalancedBraceError, UnterminatedCommentError
from stylers.style.rules import AtRule, Rule, StyleRule
from stylers.tokens.model import Group, Punct, TokenTree

__all__ = [
    "Stylesheet",
    "strip_comments",
    "validate_braces",
    "split_rules",
    "split_token_rules",
]

logger = logging.getLogger("stylers")


def strip_comments(text: str) -> str:
    """Remove every ``/* ... */`` block.

    Markers inside quoted strings are not special-cased: a value such as
    ``content: "/*"`` starts a comment.
    """
    while True:
        start = text.find("/*")
        if start == -1:
            return text
        end = text.find("*/", start + 2)
        if end == -1:
            raise UnterminatedCommentError(start)
        text = text[:start] + text[end + 2 :]


def _unquoted(text: str) -> Iterator[tuple[int, str, bool]]:
    """Yield ``(offset, char, quoted)`` for every character of *text*.

    Characters inside a single- or double-quoted string, quotes included,
    are flagged so braces in values like ``content: "}"`` are not counted.
    """
    quote: str | None = None
    escaped = False
    for offset, ch in enumerate(text):
        if quote is None:
            if ch in "\"'":
                quote = ch
                yield offset, ch, True
            else:
                yield offset, ch, False
            continue
        yield offset, ch, True
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            quote = None


def validate_braces(text: str) -> None:
    """Raise :class:`UnbalancedBraceError` unless every ``{`` has a ``}``.

    Braces inside quoted strings are ignored.
    """
    open_offsets: list[int] = []
    for offset, ch, quoted in _unquoted(text):
        if quoted:
            continue
        if ch == "{":
            open_offsets.append(offset)
        elif ch == "}":
            if not open_offsets:
                raise UnbalancedBraceError("Unexpected '}'", offset)
            open_offsets.pop()
    if open_offsets:
        raise UnbalancedBraceError("Unclosed '{'", open_offsets[-1])


def split_rules(text: str) -> list[str]:
    """Partition comment-free stylesheet text into trimmed top-level rules.

    A rule ends at a ``;`` outside braces when it starts with ``@``, or at
    the ``}`` that closes its outermost brace.
    """
    spans: list[str] = []
    buffer: list[str] = []
    started = False
    is_at_rule = False
    openings = 0
    closings = 0
    for _, ch, quoted in _unquoted(text):
        if not started:
            if ch.isspace():
                continue
            if ch == ";":
                # stray separator between rules
                continue
            started = True
            is_at_rule = ch == "@"
        buffer.append(ch)
        if quoted:
            continue
        if ch == "{":
            openings += 1
        elif ch == "}":
            closings += 1

        statement_end = ch == ";" and is_at_rule and openings == 0
        block_end = ch == "}" and openings > 0 and openings == closings
        if statement_end or block_end:
            spans.append("".join(buffer).strip())
            buffer.clear()
            started = False
            is_at_rule = False
            openings = 0
            closings = 0

    leftover = "".join(buffer).strip()
    if leftover:
        logger.debug("Dropping text with no rule boundary: %r", leftover)
    return spans


def split_token_rules(tokens: Iterable[TokenTree]) -> list[list[TokenTree]]:
    """Token-stream counterpart of :func:`split_rules`.

    A rule ends at a brace group, or at a ``;`` when it starts with ``@``.
    """
    rules: list[list[TokenTree]] = []
    current: list[TokenTree] = []
    for token in tokens:
        semicolon = isinstance(token, Punct) and token.char == ";"
        if semicolon and not current:
            continue
        current.append(token)
        if isinstance(token, Group) and token.is_brace:
            rules.append(current)
            current = []
        elif semicolon and _starts_at_rule(current):
            rules.append(current)
            current = []
    if current:
        logger.debug("Dropping %d token(s) with no rule boundary", len(current))
    return rules


def _starts_at_rule(tokens: Sequence[TokenTree]) -> bool:
    first = tokens[0]
    return isinstance(first, Punct) and first.char == "@"


@dataclass(frozen=True)
class Stylesheet:
    """Ordered rules of one style block."""

    rules: list[Rule] = field(default_factory=list)

    @classmethod
    def from_str(cls, text: str, class_: Class) -> tuple[Stylesheet, set[str]]:
        """Parse a whole stylesheet, scoping every selector with *class_*.

        Returns the stylesheet and the raw compound selectors it used.
        """
        text = strip_comments(text)
        validate_braces(text)
        return cls.from_rule_text(text, class_)

    @classmethod
    def from_rule_text(
        cls, text: str, class_: Class
    ) -> tuple[Stylesheet, set[str]]:
        """Parse already comment-stripped text, e.g. an at-rule's interior."""
        rules: list[Rule] = []
        selectors: set[str] = set()
        for span in split_rules(text):
            rule: Rule
            if span.startswith("@"):
                rule, used = AtRule.from_str(span, class_)
            else:
                rule, used = StyleRule.from_str(span, class_)
            rules.append(rule)
            selectors |= used
        logger.debug("Parsed %d rule(s) for %s", len(rules), class_)
        return cls(rules=rules), selectors

    @classmethod
    def from_tokens(
        cls, tokens: Iterable[TokenTree], class_: Class, positions: bool = True
    ) -> tuple[Stylesheet, set[str]]:
        rules: list[Rule] = []
        selectors: set[str] = set()
        for rule_tokens in split_token_rules(tokens):
            rule: Rule
            if _starts_at_rule(rule_tokens):
                rule, used = AtRule.from_tokens(rule_tokens, class_, positions)
            else:
                rule, used = StyleRule.from_tokens(rule_tokens, class_, positions)
            rules.append(rule)
            selectors |= used
        logger.debug("Parsed %d rule(s) from tokens for %s", len(rules), class_)
        return cls(rules=rules), selectors

    def css_text(self) -> str:
        return "".join(rule.css_text() for rule in self.rules)
