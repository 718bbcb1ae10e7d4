"""Render diff results as unified-diff text or colored console output."""

from __future__ import annotations

import shutil
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..constants import MAX_DISPLAY_WIDTH, NO_CHANGES_MESSAGE
from .models import DiffResult, LineKind

LINE_STYLES = {
    LineKind.REMOVED: "red",
    LineKind.ADDED: "green",
}
FILE_HEADER_STYLE = "blue"
HUNK_HEADER_STYLE = "cyan"
NO_CHANGES_STYLE = "yellow"


def render_unified(result: DiffResult) -> str:
    """Render a result as a plain unified-diff string.

    Identical inputs render as the bare "no changes" message with no headers.
    """
    if result.is_identical:
        return NO_CHANGES_MESSAGE.format(label=result.label)

    lines = [f"--- {result.label}", f"+++ {result.label}"]
    for hunk in result.hunks:
        lines.append(hunk.header())
        lines.extend(line.render() for line in hunk.lines)

    return "\n".join(lines) + "\n"


def make_console() -> Console:
    """Console clamped to MAX_DISPLAY_WIDTH for consistent display."""
    detected_width = shutil.get_terminal_size().columns
    return Console(width=min(detected_width or MAX_DISPLAY_WIDTH, MAX_DISPLAY_WIDTH))


def _styled_lines(result: DiffResult) -> list[Text]:
    """Build every output line before anything is written.

    Line text is never parsed as markup, so it reaches the console unchanged.
    """
    if result.is_identical:
        return [Text(NO_CHANGES_MESSAGE.format(label=result.label), style=NO_CHANGES_STYLE)]

    lines = [
        Text(f"--- {result.label}", style=FILE_HEADER_STYLE),
        Text(f"+++ {result.label}", style=FILE_HEADER_STYLE),
    ]
    for hunk in result.hunks:
        lines.append(Text(hunk.header(), style=HUNK_HEADER_STYLE))
        for line in hunk.lines:
            lines.append(Text(line.render(), style=LINE_STYLES.get(line.kind, "")))
    return lines


def display_diff(result: DiffResult, console: Optional[Console] = None) -> None:
    """Write a result to a rich console, one line at a time.

    Args:
        result: Diff to display
        console: Output sink; a width-clamped stdout console when omitted

    All lines are built first; if that fails, nothing is written.
    """
    if console is None:
        console = make_console()

    lines = _styled_lines(result)
    for line in lines:
        console.print(line, soft_wrap=True)
