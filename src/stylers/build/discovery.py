"""Collect scoped css from every style block in a source tree.

Python files under the search directory are parsed with :mod:`ast`. Two
calls are recognized:

    style("div { color: red; }")      inline block, scoped from its tokens
    style_sheet("styles/card.css")    external file, scoped from its text

All css is concatenated in appearance order and written to one file.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from stylers.build.params import BuildParams
from stylers.class_name import Class
from stylers.errors import HostSyntaxError, StylersError
from stylers.style import from_str, from_tokens
from stylers.tokens.lexer import lex

__all__ = [
    "MacroKind",
    "MacroCall",
    "MacroVisitor",
    "BuildReport",
    "build",
    "scope_call",
]

logger = logging.getLogger("stylers")


class MacroKind(Enum):
    STYLE = "style"
    STYLE_SHEET = "style_sheet"


@dataclass(frozen=True)
class MacroCall:
    kind: MacroKind
    argument: str
    line: int
    column: int = 0


class MacroVisitor(ast.NodeVisitor):
    """Find ``style(...)`` / ``style_sheet(...)`` calls with a string argument."""

    def __init__(self) -> None:
        self.calls: list[MacroCall] = []

    def visit_Call(self, node: ast.Call) -> None:
        name = _callee_name(node.func)
        if name in ("style", "style_sheet") and _string_argument(node) is not None:
            self.calls.append(
                MacroCall(
                    kind=MacroKind(name),
                    argument=_string_argument(node),  # type: ignore[arg-type]
                    line=node.lineno,
                    column=node.col_offset,
                )
            )
        elif name is not None and "style" in name:
            logger.debug(
                "Call to %s on line %d is not a known stylers call "
                "(use style or style_sheet)",
                name,
                node.lineno,
            )
        self.generic_visit(node)

    def sorted_calls(self) -> list[MacroCall]:
        return sorted(self.calls, key=lambda call: (call.line, call.column))


def _callee_name(func: ast.expr) -> str | None:
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _string_argument(node: ast.Call) -> str | None:
    if not node.args:
        return None
    first = node.args[0]
    if isinstance(first, ast.Constant) and isinstance(first.value, str):
        return first.value
    return None


@dataclass
class BuildReport:
    output_path: Path
    files_read: int = 0
    macros_processed: int = 0
    blocks_failed: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.blocks_failed == 0


def scope_call(call: MacroCall) -> str:
    """Return the scoped css for one recognized call."""
    if call.kind is MacroKind.STYLE:
        class_ = Class.from_seed(call.argument)
        css, _ = from_tokens(lex(call.argument), class_, positions=True)
        return css
    content = Path(call.argument).read_text(encoding="utf-8")
    return from_str(content, Class.from_seed(content))


def build(params: BuildParams) -> BuildReport:
    """Scan ``params.search_dir`` and write all scoped css to ``params.output_path``.

    Unreadable files are skipped with a warning. A failing style block is
    logged and counted without stopping the others. A file that is not
    valid Python raises :class:`HostSyntaxError` and aborts the build.
    """
    logger.info(
        "Building stylers css output: search_dir=%s pattern=%s output=%s",
        params.search_dir,
        params.pattern,
        params.output_path,
    )
    report = BuildReport(output_path=params.output_path)
    chunks: list[str] = []

    for path in sorted(params.search_dir.glob(params.pattern)):
        if not path.is_file():
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s, it can't be read: %s", path, exc)
            continue
        try:
            tree = ast.parse(content, filename=str(path))
        except (SyntaxError, ValueError) as exc:
            # NUL bytes raise ValueError before Python 3.12
            raise HostSyntaxError(str(path), exc) from exc

        report.files_read += 1
        logger.debug("Processing file %s", path)

        visitor = MacroVisitor()
        visitor.visit(tree)
        for call in visitor.sorted_calls():
            report.macros_processed += 1
            logger.debug(
                "Processing %s call in %s:%d", call.kind.value, path, call.line
            )
            try:
                chunks.append(scope_call(call))
            except (StylersError, OSError, UnicodeDecodeError) as exc:
                report.blocks_failed += 1
                report.failures.append(f"{path}:{call.line}: {exc}")
                logger.error(
                    "Style block at %s:%d failed: %s", path, call.line, exc
                )

    _write_css(params.output_path, "".join(chunks))
    logger.info(
        "Finished processing stylers: files_read=%d macros_processed=%d blocks_failed=%d",
        report.files_read,
        report.macros_processed,
        report.blocks_failed,
    )
    return report


def _write_css(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
