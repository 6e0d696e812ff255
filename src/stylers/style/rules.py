"""Rules of a scoped stylesheet: style rules and at-rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from stylers.class_name import Class
from stylers.style.declaration import StyleDeclaration
from stylers.style.selector import rewrite_selector
from stylers.tokens.model import Group, TokenTree
from stylers.tokens.spacing import join_tokens

if TYPE_CHECKING:
    from stylers.style.stylesheet import Stylesheet

__all__ = ["StyleRule", "AtRule", "Rule"]


@dataclass(frozen=True)
class StyleRule:
    """A scoped selector paired with its declaration block."""

    selector_text: str
    style: StyleDeclaration

    @classmethod
    def build(
        cls, selector: str, style: StyleDeclaration, class_: Class
    ) -> tuple[StyleRule, set[str]]:
        scoped, selectors = rewrite_selector(selector.strip(), class_)
        return cls(selector_text=scoped, style=style), selectors

    @classmethod
    def from_str(cls, text: str, class_: Class) -> tuple[StyleRule, set[str]]:
        """Split ``selector{body}`` at the first brace and scope the selector."""
        selector, _, rest = text.partition("{")
        end = rest.rfind("}")
        body = rest[:end] if end != -1 else rest
        return cls.build(selector, StyleDeclaration(body), class_)

    @classmethod
    def from_tokens(
        cls, tokens: Sequence[TokenTree], class_: Class, positions: bool = True
    ) -> tuple[StyleRule, set[str]]:
        """Everything before the first brace group is selector material."""
        for index, token in enumerate(tokens):
            if isinstance(token, Group) and token.is_brace:
                selector = join_tokens(tokens[:index], positions)
                return cls.build(
                    selector, StyleDeclaration.from_tokens(token, positions), class_
                )
        return cls.build(join_tokens(tokens, positions), StyleDeclaration(), class_)

    def css_text(self) -> str:
        return self.selector_text + self.style.css_text()


@dataclass(frozen=True)
class AtRule:
    """An ``@`` rule in statement form or block form.

    Statement form (``@import url(a.css);``) has no ``block`` and is emitted
    verbatim. Block form keeps its prelude verbatim and holds either a
    nested :class:`Stylesheet`, scoped like the top level, or, for
    keyframes and declaration-only blocks such as ``@font-face``, the
    interior as an unscoped :class:`StyleDeclaration`.
    """

    prelude: str
    block: Stylesheet | StyleDeclaration | None = None

    @classmethod
    def from_str(cls, text: str, class_: Class) -> tuple[AtRule, set[str]]:
        from stylers.style.stylesheet import Stylesheet

        if "{" not in text:
            return cls(prelude=text), set()
        prelude, _, rest = text.partition("{")
        end = rest.rfind("}")
        interior = rest[:end] if end != -1 else rest
        if _keyframes(prelude) or "{" not in interior:
            return cls(prelude=prelude, block=StyleDeclaration(interior)), set()
        nested, selectors = Stylesheet.from_rule_text(interior, class_)
        return cls(prelude=prelude, block=nested), selectors

    @classmethod
    def from_tokens(
        cls, tokens: Sequence[TokenTree], class_: Class, positions: bool = True
    ) -> tuple[AtRule, set[str]]:
        from stylers.style.stylesheet import Stylesheet

        last = tokens[-1] if tokens else None
        if not (isinstance(last, Group) and last.is_brace):
            return cls(prelude=join_tokens(tokens, positions)), set()
        prelude = join_tokens(tokens[:-1], positions)
        nested_rules = any(
            isinstance(token, Group) and token.is_brace for token in last.tokens
        )
        if _keyframes(prelude) or not nested_rules:
            body = StyleDeclaration.from_tokens(last, positions)
            return cls(prelude=prelude, block=body), set()
        nested, selectors = Stylesheet.from_tokens(last.tokens, class_, positions)
        return cls(prelude=prelude, block=nested), selectors

    def css_text(self) -> str:
        if self.block is None:
            return self.prelude
        if isinstance(self.block, StyleDeclaration):
            return self.prelude + self.block.css_text()
        return self.prelude + "{" + self.block.css_text() + "}"


def _keyframes(prelude: str) -> bool:
    # @keyframes, @-webkit-keyframes, ...
    words = prelude.split()
    return bool(words) and words[0].endswith("keyframes")


Rule = Union[AtRule, StyleRule]
