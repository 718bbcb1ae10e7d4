"""Value types produced by the diff engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """How a line is shown in a hunk; the value is its unified-diff prefix."""

    CONTEXT = " "
    REMOVED = "-"
    ADDED = "+"


class OpTag(Enum):
    """Edit operation kinds emitted by the comparator."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class EditOp:
    """One step of an alignment between the original and modified lines.

    ``original_index`` is ``None`` for insertions and ``modified_index`` is
    ``None`` for deletions.
    """

    tag: OpTag
    original_index: int | None
    modified_index: int | None


@dataclass(frozen=True)
class RenderedLine:
    """A single line of a hunk."""

    kind: LineKind
    text: str

    @classmethod
    def context(cls, text: str) -> RenderedLine:
        return cls(LineKind.CONTEXT, text)

    @classmethod
    def removed(cls, text: str) -> RenderedLine:
        return cls(LineKind.REMOVED, text)

    @classmethod
    def added(cls, text: str) -> RenderedLine:
        return cls(LineKind.ADDED, text)

    def render(self) -> str:
        """Return the line with its unified-diff prefix."""
        return f"{self.kind.value}{self.text}"


@dataclass(frozen=True)
class Hunk:
    """A contiguous region of change with its surrounding context.

    Starts are 1-based. Counts are taken from the lines actually placed in the
    hunk so the header always agrees with the body.
    """

    original_start: int
    modified_start: int
    lines: tuple[RenderedLine, ...]

    @property
    def original_count(self) -> int:
        return sum(1 for line in self.lines if line.kind is not LineKind.ADDED)

    @property
    def modified_count(self) -> int:
        return sum(1 for line in self.lines if line.kind is not LineKind.REMOVED)

    @property
    def has_changes(self) -> bool:
        return any(line.kind is not LineKind.CONTEXT for line in self.lines)

    def original_lines(self) -> list[str]:
        """Context and removed lines, i.e. this hunk's slice of the original."""
        return [line.text for line in self.lines if line.kind is not LineKind.ADDED]

    def modified_lines(self) -> list[str]:
        """Context and added lines, i.e. this hunk's slice of the modified text."""
        return [line.text for line in self.lines if line.kind is not LineKind.REMOVED]

    def header(self) -> str:
        return (
            f"@@ -{self.original_start},{self.original_count} "
            f"+{self.modified_start},{self.modified_count} @@"
        )


@dataclass(frozen=True)
class DiffResult:
    """Result of comparing two buffers under one display label."""

    label: str
    original: tuple[str, ...]
    modified: tuple[str, ...]
    hunks: tuple[Hunk, ...]
    engine_used: str

    @property
    def is_identical(self) -> bool:
        return not self.hunks

    @property
    def added(self) -> int:
        return sum(1 for hunk in self.hunks for line in hunk.lines if line.kind is LineKind.ADDED)

    @property
    def removed(self) -> int:
        return sum(1 for hunk in self.hunks for line in hunk.lines if line.kind is LineKind.REMOVED)

    @property
    def unchanged(self) -> int:
        return len(self.original) - self.removed

    def summary(self) -> dict[str, int]:
        """Return added/removed/unchanged line counts."""
        return {"added": self.added, "removed": self.removed, "unchanged": self.unchanged}
