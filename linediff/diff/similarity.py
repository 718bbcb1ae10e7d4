"""Longest-common-subsequence table over two line sequences."""

from __future__ import annotations

from collections.abc import Sequence

from .models import EditOp, OpTag


def split_lines(text: str) -> tuple[str, ...]:
    """Split a buffer on ``\\n`` without normalizing line endings.

    A trailing newline leaves a final empty line, and ``\\r`` stays part of
    the line text.
    """
    return tuple(text.split("\n"))


class SimilarityTable:
    """LCS length table for ``original`` against ``modified``.

    ``table[i][j]`` holds the LCS length of ``original[:i]`` and
    ``modified[:j]``. Building it costs O(m*n) time and memory.
    """

    def __init__(self, original: Sequence[str], modified: Sequence[str], table: list[list[int]]):
        self.original = original
        self.modified = modified
        self.table = table

    @classmethod
    def build(cls, original: Sequence[str], modified: Sequence[str]) -> SimilarityTable:
        m = len(original)
        n = len(modified)
        table = [[0] * (n + 1) for _ in range(m + 1)]

        for i in range(1, m + 1):
            row = table[i]
            prev = table[i - 1]
            line = original[i - 1]
            for j in range(1, n + 1):
                if line == modified[j - 1]:
                    row[j] = prev[j - 1] + 1
                else:
                    row[j] = max(prev[j], row[j - 1])

        return cls(original, modified, table)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.original), len(self.modified)

    def __getitem__(self, index: int) -> list[int]:
        return self.table[index]

    def lcs_length(self) -> int:
        """Length of the longest common subsequence of both sequences."""
        m, n = self.shape
        return self.table[m][n]

    def backtrace(self) -> list[EditOp]:
        """Recover an alignment as a forward-ordered list of edit operations.

        Within a run of changes every deletion comes before the insertions.
        """
        i, j = self.shape
        reverse_ops: list[EditOp] = []

        while i > 0 or j > 0:
            if i > 0 and j > 0 and self.original[i - 1] == self.modified[j - 1]:
                reverse_ops.append(EditOp(OpTag.EQUAL, i - 1, j - 1))
                i -= 1
                j -= 1
            elif j > 0 and (i == 0 or self.table[i][j - 1] >= self.table[i - 1][j]):
                reverse_ops.append(EditOp(OpTag.INSERT, None, j - 1))
                j -= 1
            else:
                reverse_ops.append(EditOp(OpTag.DELETE, i - 1, None))
                i -= 1

        reverse_ops.reverse()
        return order_changes(reverse_ops)


def order_changes(ops: list[EditOp]) -> list[EditOp]:
    """Move deletions ahead of insertions inside each run of changes.

    Relative order on each side is kept, so both sequences still rebuild
    from the result.
    """
    ordered: list[EditOp] = []
    deletes: list[EditOp] = []
    inserts: list[EditOp] = []

    for op in ops:
        if op.tag is OpTag.DELETE:
            deletes.append(op)
        elif op.tag is OpTag.INSERT:
            inserts.append(op)
        else:
            ordered.extend(deletes)
            ordered.extend(inserts)
            deletes.clear()
            inserts.clear()
            ordered.append(op)

    ordered.extend(deletes)
    ordered.extend(inserts)
    return ordered
