"""Group edit operations into unified-diff hunks."""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import CONTEXT_LINES
from .models import EditOp, Hunk, OpTag, RenderedLine


def _hunk_spans(ops: Sequence[EditOp], context_lines: int) -> list[tuple[int, int]]:
    """Return ``[start, end)`` op ranges, one per hunk.

    Changes separated by no more than ``2 * context_lines`` equal lines share
    a hunk, so spans never overlap.
    """
    spans: list[tuple[int, int]] = []
    start = end = -1

    for k, op in enumerate(ops):
        if op.tag is OpTag.EQUAL:
            continue
        if end >= 0 and k - context_lines <= end:
            end = min(len(ops), k + 1 + context_lines)
            continue
        if end >= 0:
            spans.append((start, end))
        start = max(0, k - context_lines)
        end = min(len(ops), k + 1 + context_lines)

    if end >= 0:
        spans.append((start, end))
    return spans


def build_hunks(
    ops: Sequence[EditOp],
    original: Sequence[str],
    modified: Sequence[str],
    context_lines: int = CONTEXT_LINES,
) -> list[Hunk]:
    """Build hunks with up to ``context_lines`` of context around each change.

    Args:
        ops: Forward-ordered alignment covering both sequences
        original: Lines of the original buffer
        modified: Lines of the modified buffer
        context_lines: Unchanged lines kept before and after each change

    Returns:
        Hunks in document order; empty when the sequences are identical
    """
    # Line cursor on each side before op k
    original_pos = [0] * (len(ops) + 1)
    modified_pos = [0] * (len(ops) + 1)
    for k, op in enumerate(ops):
        original_pos[k + 1] = original_pos[k] + (op.original_index is not None)
        modified_pos[k + 1] = modified_pos[k] + (op.modified_index is not None)

    hunks: list[Hunk] = []
    for start, end in _hunk_spans(ops, context_lines):
        lines: list[RenderedLine] = []
        for op in ops[start:end]:
            if op.tag is OpTag.EQUAL:
                lines.append(RenderedLine.context(original[op.original_index]))
            elif op.tag is OpTag.DELETE:
                lines.append(RenderedLine.removed(original[op.original_index]))
            else:
                lines.append(RenderedLine.added(modified[op.modified_index]))

        hunk = Hunk(
            original_start=original_pos[start] + 1,
            modified_start=modified_pos[start] + 1,
            lines=tuple(lines),
        )
        if hunk.has_changes:
            hunks.append(hunk)

    return hunks
