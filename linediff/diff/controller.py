"""Diff controller with business logic."""

from collections.abc import Iterable
from typing import Optional

from rich.console import Console

from ..logging_config import get_logger
from .config import DiffConfig
from .engines import get_engine
from .hunks import build_hunks
from .models import DiffResult
from .render import display_diff, make_console, render_unified
from .similarity import split_lines

logger = get_logger("diff.controller")


class DiffController:
    """Business logic for diff operations."""

    def __init__(self, config: Optional[DiffConfig] = None):
        """Initialize diff controller.

        Args:
            config: Optional DiffConfig; defaults to the lcs engine with three
                lines of context
        """
        self.config = config or DiffConfig()

    def diff(self, original: str, modified: str, label: str) -> DiffResult:
        """Compare two buffers.

        Args:
            original: Full original text
            modified: Full modified text
            label: Display identifier, used verbatim

        Returns:
            DiffResult with no hunks when the texts are identical

        Raises:
            ValueError: If the configured engine is not registered
        """
        engine_name = self.config.engine
        engine = get_engine(engine_name)
        if not engine:
            raise ValueError(f"Unknown engine: {engine_name}")

        original_lines = split_lines(original)
        modified_lines = split_lines(modified)

        if original == modified:
            return DiffResult(
                label=label,
                original=original_lines,
                modified=modified_lines,
                hunks=(),
                engine_used=engine_name,
            )

        ops = engine.compare(original_lines, modified_lines, self.config.options)
        hunks = build_hunks(ops, original_lines, modified_lines, self.config.context_lines)
        logger.debug("%s: %d hunk(s) via %s", label, len(hunks), engine_name)

        return DiffResult(
            label=label,
            original=original_lines,
            modified=modified_lines,
            hunks=tuple(hunks),
            engine_used=engine_name,
        )

    def unified_diff(self, original: str, modified: str, label: str) -> str:
        """Return the plain unified-diff rendering of two buffers."""
        return render_unified(self.diff(original, modified, label))

    def display(
        self,
        original: str,
        modified: str,
        label: str,
        console: Optional[Console] = None,
    ) -> DiffResult:
        """Write the colored rendering to ``console`` and return the result."""
        result = self.diff(original, modified, label)
        display_diff(result, console)
        return result

    def preview(
        self,
        changes: Iterable[tuple[str, str, str]],
        console: Optional[Console] = None,
    ) -> list[DiffResult]:
        """Dry-run preview of several files.

        Args:
            changes: ``(label, original, modified)`` per file; pass an empty
                original for a file that would be created
            console: Output sink shared by every file

        Returns:
            One DiffResult per entry, in input order
        """
        if console is None:
            console = make_console()

        results = []
        for label, original, modified in changes:
            results.append(self.display(original, modified, label, console))
        return results
