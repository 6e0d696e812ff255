"""Error types raised by the scoping engine and the build."""


class StylersError(Exception):
    """Base class for every error raised by stylers."""


class UnbalancedBraceError(StylersError):
    """Raised when a stylesheet's ``{``/``}`` do not pair up.

    ``offset`` indexes into the comment-stripped text.
    """

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class UnterminatedCommentError(StylersError):
    """Raised when a ``/*`` has no matching ``*/``."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"Unterminated comment starting at offset {offset}")


class LexError(StylersError):
    """Raised when inline style source cannot be split into tokens."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class BuildConfigError(StylersError):
    """Raised for an unusable search directory or output path."""


class HostSyntaxError(StylersError):
    """Raised when a host source file is not valid Python. Aborts the build."""

    def __init__(self, path: str, cause: SyntaxError | ValueError):
        self.path = path
        self.line = getattr(cause, "lineno", None)
        message = getattr(cause, "msg", None) or str(cause)
        where = f" (line {self.line})" if self.line is not None else ""
        super().__init__(f"Couldn't parse {path}{where}: {message}")
