"""Build configuration: where to look for sources and where to write css."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from stylers.errors import BuildConfigError

logger = logging.getLogger("stylers")

DEFAULT_OUTPUT_PATH = Path("target") / "stylers_out.css"
DEFAULT_SEARCH_DIR = Path("src")
DEFAULT_PATTERN = "**/*.py"


@dataclass(frozen=True)
class BuildParams:
    output_path: Path
    search_dir: Path
    pattern: str = DEFAULT_PATTERN

    @staticmethod
    def builder() -> BuildParamsBuilder:
        return BuildParamsBuilder()


@dataclass(frozen=True)
class BuildParamsBuilder:
    """Validating builder for :class:`BuildParams`.

    Unset paths default to ``target/stylers_out.css`` and ``src`` under the
    current working directory when :meth:`finish` is called.
    """

    output_path: Path | None = None
    search_dir: Path | None = None
    pattern: str = DEFAULT_PATTERN

    def with_output_path(self, path: str | Path) -> BuildParamsBuilder:
        """Use *path* for the collected css, creating it (and its parents)."""
        path = Path(path)
        if path.is_dir():
            raise BuildConfigError(f"Output path {path} is a directory")
        if not path.is_file():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning(
                    "Couldn't create output directory for %s: %s", path, exc
                )
            try:
                path.touch()
            except OSError as exc:
                raise BuildConfigError(
                    f"Couldn't create output file at {path}: {exc}"
                ) from exc
        return replace(self, output_path=path)

    def with_search_dir(self, path: str | Path) -> BuildParamsBuilder:
        path = Path(path)
        if not path.is_dir():
            raise BuildConfigError(
                f"Search dir {path} does not exist, or is not a directory"
            )
        return replace(self, search_dir=path)

    def with_pattern(self, pattern: str) -> BuildParamsBuilder:
        return replace(self, pattern=pattern)

    def finish(self) -> BuildParams:
        builder = self
        if builder.output_path is None:
            builder = builder.with_output_path(Path.cwd() / DEFAULT_OUTPUT_PATH)
        if builder.search_dir is None:
            builder = builder.with_search_dir(Path.cwd() / DEFAULT_SEARCH_DIR)
        return BuildParams(
            output_path=builder.output_path,  # type: ignore[arg-type]
            search_dir=builder.search_dir,  # type: ignore[arg-type]
            pattern=builder.pattern,
        )
