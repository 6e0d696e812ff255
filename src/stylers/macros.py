"""Runtime helpers mirroring the calls the build collects.

``style("...")`` and ``style_sheet("path.css")`` return the class name to
put on a component's markup. The build derives the same class from the
same seed, so the collected css and the markup agree. The ``*_str``
variants also scope the css at runtime.
"""

from __future__ import annotations

from pathlib import Path

from stylers.class_name import Class
from stylers.style import from_str, from_tokens
from stylers.tokens.lexer import lex

__all__ = ["style", "style_str", "style_sheet", "style_sheet_str"]


def style(css: str) -> str:
    return Class.from_seed(css).name


def style_str(css: str) -> tuple[str, str]:
    """Return ``(class name, scoped css)`` for an inline style block."""
    class_ = Class.from_seed(css)
    scoped, _ = from_tokens(lex(css), class_, positions=True)
    return class_.name, scoped


def style_sheet(path: str | Path) -> str:
    return Class.from_seed(_read(path)).name


def style_sheet_str(path: str | Path) -> tuple[str, str]:
    """Return ``(class name, scoped css)`` for an external stylesheet."""
    content = _read(path)
    class_ = Class.from_seed(content)
    return class_.name, from_str(content, class_)


def _read(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")
