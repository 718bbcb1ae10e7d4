"""Diff module - line-based comparison and unified-diff rendering."""

from .config import DiffConfig, DiffConfigError
from .controller import DiffController
from .engines import ENGINES, get_engine
from .hunks import build_hunks
from .models import DiffResult, EditOp, Hunk, LineKind, OpTag, RenderedLine
from .render import display_diff, render_unified
from .similarity import SimilarityTable, split_lines

__all__ = [
    "ENGINES",
    "DiffConfig",
    "DiffConfigError",
    "DiffController",
    "DiffResult",
    "EditOp",
    "Hunk",
    "LineKind",
    "OpTag",
    "RenderedLine",
    "SimilarityTable",
    "build_hunks",
    "display_diff",
    "get_engine",
    "render_unified",
    "split_lines",
]
