"""linediff - line-based diff previews for source transformations."""

from typing import Optional

from rich.console import Console

from .diff import DiffController, DiffResult

__all__ = ["DiffController", "DiffResult", "display_diff", "generate_unified_diff"]


def generate_unified_diff(original: str, modified: str, label: str) -> str:
    """Unified diff of two buffers, or the "no changes" message when identical."""
    return DiffController().unified_diff(original, modified, label)


def display_diff(original: str, modified: str, label: str, console: Optional[Console] = None) -> DiffResult:
    """Write a colored diff of two buffers to ``console``."""
    return DiffController().display(original, modified, label, console)
