from stylers.build.discovery import BuildReport, MacroCall, MacroKind, MacroVisitor, build
from stylers.build.params import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PATTERN,
    DEFAULT_SEARCH_DIR,
    BuildParams,
    BuildParamsBuilder,
)

__all__ = [
    "build",
    "BuildParams",
    "BuildParamsBuilder",
    "BuildReport",
    "MacroCall",
    "MacroKind",
    "MacroVisitor",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_PATTERN",
    "DEFAULT_SEARCH_DIR",
]
