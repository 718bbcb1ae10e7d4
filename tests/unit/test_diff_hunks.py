"""Tests for linediff/diff/hunks.py - grouping changes into hunks."""

from linediff.diff.engines import LcsEngine
from linediff.diff.hunks import build_hunks
from linediff.diff.models import Hunk, LineKind, RenderedLine


def hunks_for(original, modified, context_lines=3):
    ops = LcsEngine().compare(original, modified, {})
    return build_hunks(ops, original, modified, context_lines)


class TestBuildHunks:
    """Test build_hunks."""

    def test_identical_sequences_have_no_hunks(self):
        assert hunks_for(["a", "b"], ["a", "b"]) == []

    def test_single_insertion_with_context(self):
        hunks = hunks_for(["A", "B", "C"], ["A", "B", "X", "C"])
        assert hunks == [
            Hunk(
                original_start=1,
                modified_start=1,
                lines=(
                    RenderedLine.context("A"),
                    RenderedLine.context("B"),
                    RenderedLine.added("X"),
                    RenderedLine.context("C"),
                ),
            )
        ]
        assert hunks[0].original_count == 3
        assert hunks[0].modified_count == 4

    def test_leading_context_is_bounded(self):
        original = [f"l{k}" for k in range(10)]
        modified = original[:8] + ["changed"] + original[9:]
        (hunk,) = hunks_for(original, modified)
        assert hunk.original_start == 6
        assert hunk.modified_start == 6
        assert [line.text for line in hunk.lines] == ["l5", "l6", "l7", "l8", "changed", "l9"]

    def test_zero_context(self):
        (hunk,) = hunks_for(["A", "Old", "C"], ["A", "New", "C"], context_lines=0)
        assert hunk.lines == (RenderedLine.removed("Old"), RenderedLine.added("New"))
        assert (hunk.original_start, hunk.original_count) == (2, 1)
        assert (hunk.modified_start, hunk.modified_count) == (2, 1)

    def test_nearby_changes_share_a_hunk(self):
        middle = [str(k) for k in range(1, 7)]
        hunks = hunks_for(["a"] + middle + ["b"], ["A"] + middle + ["B"])
        assert len(hunks) == 1
        assert hunks[0].original_count == 8

    def test_distant_changes_split(self):
        middle = [str(k) for k in range(1, 8)]
        first, second = hunks_for(["a"] + middle + ["b"], ["A"] + middle + ["B"])

        assert [line.render() for line in first.lines] == ["-a", "+A", " 1", " 2", " 3"]
        assert [line.render() for line in second.lines] == [" 5", " 6", " 7", "-b", "+B"]
        assert (second.original_start, second.modified_start) == (6, 6)

    def test_change_at_end_has_no_trailing_context(self):
        (hunk,) = hunks_for(["a", "b", "c", "d", "e"], ["a", "b", "c", "d", "E"])
        assert hunk.lines[-1] == RenderedLine.added("E")
        assert hunk.original_count == 4
        assert hunk.modified_count == 4

    def test_shared_trailing_newline_is_context(self):
        (hunk,) = hunks_for(["a", "b", ""], ["a", "c", ""])
        assert hunk.lines[-1] == RenderedLine.context("")

    def test_counts_match_lines(self):
        original = ["x", "a", "b", "c", "y", "d", "e"]
        modified = ["a", "b", "z", "c", "d", "e", "w"]
        for hunk in hunks_for(original, modified, context_lines=1):
            kinds = [line.kind for line in hunk.lines]
            assert hunk.original_count == kinds.count(LineKind.CONTEXT) + kinds.count(LineKind.REMOVED)
            assert hunk.modified_count == kinds.count(LineKind.CONTEXT) + kinds.count(LineKind.ADDED)

    def test_empty_against_content(self):
        (hunk,) = hunks_for([""], ["x"])
        assert hunk.lines == (RenderedLine.removed(""), RenderedLine.added("x"))
        assert hunk.header() == "@@ -1,1 +1,1 @@"


class TestHunk:
    """Test Hunk helpers."""

    def test_header(self):
        hunk = Hunk(
            original_start=4,
            modified_start=5,
            lines=(RenderedLine.context("a"), RenderedLine.removed("b"), RenderedLine.added("c")),
        )
        assert hunk.header() == "@@ -4,2 +5,2 @@"

    def test_side_lines(self):
        hunk = Hunk(
            original_start=1,
            modified_start=1,
            lines=(RenderedLine.removed("old"), RenderedLine.context("same"), RenderedLine.added("new")),
        )
        assert hunk.original_lines() == ["old", "same"]
        assert hunk.modified_lines() == ["same", "new"]

    def test_context_only_hunk_has_no_changes(self):
        hunk = Hunk(original_start=1, modified_start=1, lines=(RenderedLine.context("a"),))
        assert not hunk.has_changes
