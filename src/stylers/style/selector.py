"""Selector rewriting: append the scoping class to every compound selector.

The rewriter is a character-level state machine. Each character is handled
by exactly one state, in this priority order:

    newline        dropped, so selectors wrapped over lines are joined
    AFTER_DEEP     one whitespace run after ``:deep(...)`` becomes one space
    ATTRIBUTE      ``[...]`` copied whole, class appended after ``]``
    DEEP           ``:deep(...)`` body copied unscoped, parentheses removed
    PENDING_DEEP   the ``deep`` keyword between ``:`` and ``(``
    PSEUDO         pseudo-class copied up to whitespace or a combinator
    SEPARATOR      whitespace and combinators between compound selectors
    NORMAL         everything else

Example::

    >>> rewrite_selector("div > p:hover", Class("test"))
    ('div.test > p.test:hover', {'div', 'p:hover'})
"""

from __future__ import annotations

from enum import Enum

from stylers.class_name import Class

__all__ = ["State", "SelectorRewriter", "rewrite_selector"]

COMBINATORS = frozenset(",+~>|")
_QUOTES = frozenset("\"'")


class State(Enum):
    """Scanner states of :class:`SelectorRewriter`."""

    NORMAL = "normal"
    SEPARATOR = "separator"
    ATTRIBUTE = "attribute"
    PSEUDO = "pseudo"
    PENDING_DEEP = "pending_deep"
    DEEP = "deep"
    AFTER_DEEP = "after_deep"


class SelectorRewriter:
    """Rewrite one selector string for a single :class:`Class`.

    A rewriter is single use: build one per selector and call
    :meth:`rewrite`.
    """

    def __init__(self, text: str, class_: Class):
        self._text = text
        self._fragment = class_.as_selector()
        self._state = State.NORMAL
        self._out: list[str] = []
        # Raw text of the compound selector being scanned.
        self._compound: list[str] = []
        # Whether the current compound already carries the class.
        self._qualified = False
        self._selectors: set[str] = set()
        self._pending_space = False
        self._depth = 0
        self._quote: str | None = None
        self._attribute_return = State.NORMAL
        self._deep_start = 0

    @property
    def state(self) -> State:
        return self._state

    def rewrite(self) -> tuple[str, set[str]]:
        """Return the scoped selector text and the raw compound selectors."""
        for index, ch in enumerate(self._text):
            if ch in "\r\n":
                continue
            self._step(index, ch)
        self._finish()

        result = "".join(self._out)
        # :root is global: it replaces the whole selector, co-selectors included.
        if ":root" in result:
            result = ":root"
        return result, self._selectors

    # ---- transitions ----

    def _step(self, index: int, ch: str) -> None:
        state = self._state
        if state is State.AFTER_DEEP:
            self._after_deep(index, ch)
        elif state is State.ATTRIBUTE:
            self._attribute(ch)
        elif state is State.DEEP:
            self._deep(ch)
        elif state is State.PENDING_DEEP:
            if ch == "(":
                self._state = State.DEEP
                self._depth = 0
                self._deep_start = len(self._out)
        elif state is State.PSEUDO:
            self._pseudo(index, ch)
        elif state is State.SEPARATOR:
            self._separator(index, ch)
        else:
            self._normal(index, ch)

    def _after_deep(self, index: int, ch: str) -> None:
        if ch.isspace():
            self._pending_space = True
            return
        self._emit_pending_space()
        self._state = State.NORMAL
        self._step(index, ch)

    def _attribute(self, ch: str) -> None:
        self._out.append(ch)
        self._compound.append(ch)
        if self._quote is not None:
            if ch == self._quote:
                self._quote = None
            return
        if ch in _QUOTES:
            self._quote = ch
        elif ch == "]":
            if self._attribute_return is not State.DEEP and not self._qualified:
                self._out.append(self._fragment)
                self._qualified = True
            self._record()
            self._state = self._attribute_return

    def _deep(self, ch: str) -> None:
        if ch == "[":
            self._enter_attribute(State.DEEP)
            return
        if ch == "(":
            self._depth += 1
        elif ch == ")":
            if self._depth == 0:
                self._close_deep()
                return
            self._depth -= 1
        self._out.append(ch)

    def _pseudo(self, index: int, ch: str) -> None:
        ends = ch.isspace() or ch in COMBINATORS or self._deep_at(index, ch)
        if self._depth == 0 and ends:
            self._state = State.NORMAL
            self._step(index, ch)
            return
        if ch == "(":
            self._depth += 1
        elif ch == ")" and self._depth > 0:
            self._depth -= 1
        self._out.append(ch)
        self._compound.append(ch)

    def _separator(self, index: int, ch: str) -> None:
        if ch.isspace():
            self._pending_space = bool(self._out)
            return
        self._emit_pending_space()
        if ch in COMBINATORS:
            self._out.append(ch)
            return
        self._state = State.NORMAL
        self._step(index, ch)

    def _normal(self, index: int, ch: str) -> None:
        if ch == "[":
            self._enter_attribute(State.NORMAL)
        elif ch == ":":
            if self._deep_at(index, ch):
                if self._compound or self._qualified:
                    self._flush()
                    self._out.append(" ")
                self._state = State.PENDING_DEEP
                return
            self._qualify()
            self._out.append(ch)
            self._compound.append(ch)
            self._state = State.PSEUDO
            self._depth = 0
        elif ch in COMBINATORS:
            self._flush()
            self._out.append(ch)
            self._state = State.SEPARATOR
            self._pending_space = False
        elif ch == "*":
            self._qualify()
            self._selectors.add("*")
        elif ch.isspace():
            self._flush()
            self._state = State.SEPARATOR
            self._pending_space = bool(self._out)
        else:
            self._out.append(ch)
            self._compound.append(ch)

    def _finish(self) -> None:
        if self._state is State.ATTRIBUTE:
            self._record()
        else:
            self._flush()

    # ---- helpers ----

    def _deep_at(self, index: int, ch: str) -> bool:
        return ch == ":" and self._text.startswith("deep(", index + 1)

    def _close_deep(self) -> None:
        # Padding inside the parentheses would double the separator spaces.
        body = "".join(self._out[self._deep_start :]).strip()
        del self._out[self._deep_start :]
        self._out.append(body)
        self._state = State.AFTER_DEEP
        self._pending_space = False

    def _enter_attribute(self, return_state: State) -> None:
        self._attribute_return = return_state
        self._state = State.ATTRIBUTE
        self._quote = None
        self._out.append("[")
        self._compound.append("[")

    def _qualify(self) -> None:
        if not self._qualified:
            self._out.append(self._fragment)
            self._qualified = True

    def _flush(self) -> None:
        if self._compound and not self._qualified:
            self._out.append(self._fragment)
        self._record()
        self._qualified = False

    def _record(self) -> None:
        if self._compound:
            self._selectors.add("".join(self._compound))
            self._compound.clear()

    def _emit_pending_space(self) -> None:
        if self._pending_space:
            self._out.append(" ")
            self._pending_space = False


def rewrite_selector(text: str, class_: Class) -> tuple[str, set[str]]:
    """Scope *text* with *class_*; see :class:`SelectorRewriter`."""
    return SelectorRewriter(text, class_).rewrite()
