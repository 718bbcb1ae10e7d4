"""Shared pytest configuration and fixtures for all tests."""

import io

import pytest
from rich.console import Console

from linediff.diff import DiffConfig, DiffController


def pytest_configure(config):
    """Register the markers applied by directory."""
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Diff Helpers
# =============================================================================


def _rebuild(lines, hunks, side: str) -> list[str]:
    """Rebuild one side of a diff from its hunks plus the skipped lines.

    ``side`` is "original" or "modified"; ``lines`` is that side's sequence.
    """
    rebuilt: list[str] = []
    pos = 0
    for hunk in hunks:
        if side == "original":
            start, body = hunk.original_start - 1, hunk.original_lines()
        else:
            start, body = hunk.modified_start - 1, hunk.modified_lines()
        assert start >= pos, "hunks overlap or are out of order"
        rebuilt.extend(lines[pos:start])
        rebuilt.extend(body)
        pos = start + len(body)
    rebuilt.extend(lines[pos:])
    return rebuilt


@pytest.fixture
def rebuild():
    """Function rebuilding one side of a diff from its hunks."""
    return _rebuild


@pytest.fixture(params=["lcs", "lookahead"])
def engine_name(request) -> str:
    """Every registered engine."""
    return request.param


@pytest.fixture
def controller(engine_name: str) -> DiffController:
    """DiffController for each engine with default context."""
    return DiffController(DiffConfig(engine=engine_name))


@pytest.fixture
def console_output():
    """Plain-text rich console writing into a buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return console, buffer
