"""Style declaration: the literal body of a rule, kept unvalidated."""

from __future__ import annotations

from dataclasses import dataclass

from stylers.tokens.model import Group
from stylers.tokens.spacing import join_tokens


@dataclass(frozen=True)
class StyleDeclaration:
    """Text between a rule's braces. Unknown properties pass through as-is."""

    text: str = ""

    @classmethod
    def from_tokens(cls, group: Group, positions: bool = True) -> StyleDeclaration:
        return cls(join_tokens(group.tokens, positions))

    def css_text(self) -> str:
        return "{" + self.text + "}"
