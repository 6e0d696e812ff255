"""Stylers: scoped css for component styles.

Every selector of a style block is rewritten to carry a class derived
from the block's own text, so the rules only match the component that
declares them.
"""

from stylers.class_name import Class
from stylers.errors import (
    BuildConfigError,
    HostSyntaxError,
    LexError,
    StylersError,
    UnbalancedBraceError,
    UnterminatedCommentError,
)
from stylers.macros import style, style_sheet, style_sheet_str, style_str
from stylers.style import from_str, from_tokens

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Class",
    "from_str",
    "from_tokens",
    "style",
    "style_str",
    "style_sheet",
    "style_sheet_str",
    "StylersError",
    "UnbalancedBraceError",
    "UnterminatedCommentError",
    "LexError",
    "BuildConfigError",
    "HostSyntaxError",
]
