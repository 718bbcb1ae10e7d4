"""Diff engines that align two line sequences."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from ..constants import LOOKAHEAD_WINDOW
from ..logging_config import get_logger
from .models import EditOp, OpTag
from .similarity import SimilarityTable, order_changes

logger = get_logger("diff.engines")


class DiffEngine(ABC):
    """Base class for diff engines."""

    @abstractmethod
    def compare(self, original: Sequence[str], modified: Sequence[str], options: dict) -> list[EditOp]:
        """Align two line sequences.

        Args:
            original: Lines of the original buffer
            modified: Lines of the modified buffer
            options: Engine-specific options

        Returns:
            Edit operations in forward order covering every line of both sides
        """
        pass


class LcsEngine(DiffEngine):
    """Full LCS table with a backtrace; finds a minimal alignment."""

    def compare(self, original: Sequence[str], modified: Sequence[str], options: dict) -> list[EditOp]:  # noqa: ARG002
        table = SimilarityTable.build(original, modified)
        m, n = table.shape
        logger.debug("Built %dx%d similarity table (lcs=%d)", m + 1, n + 1, table.lcs_length())
        return table.backtrace()


class LookaheadEngine(DiffEngine):
    """Bounded local lookahead at each mismatch.

    An original line that does not reappear within the next ``lookahead_window``
    modified lines is removed; a modified line that does not reappear within the
    next ``lookahead_window`` original lines is added. Lines that move farther
    than the window show up as an unrelated removal and addition.
    """

    def compare(self, original: Sequence[str], modified: Sequence[str], options: dict) -> list[EditOp]:
        window = options.get("lookahead_window", LOOKAHEAD_WINDOW)
        m = len(original)
        n = len(modified)
        i = j = 0
        ops: list[EditOp] = []

        while i < m or j < n:
            if i < m and j < n and original[i] == modified[j]:
                ops.append(EditOp(OpTag.EQUAL, i, j))
                i += 1
                j += 1
                continue

            progressed = False

            while i < m and (j >= n or original[i] != modified[j]):
                if original[i] in modified[j:j + window]:
                    break
                ops.append(EditOp(OpTag.DELETE, i, None))
                i += 1
                progressed = True

            while j < n and (i >= m or modified[j] != original[i]):
                if modified[j] in original[i:i + window]:
                    break
                ops.append(EditOp(OpTag.INSERT, None, j))
                j += 1
                progressed = True

            # Both lines reappear nearby (e.g. swapped lines); drop the
            # original one so the scan keeps moving.
            if not progressed:
                ops.append(EditOp(OpTag.DELETE, i, None))
                i += 1

        logger.debug("Lookahead alignment produced %d operations (window=%d)", len(ops), window)
        return order_changes(ops)


# Registry of available engines
ENGINES: dict[str, DiffEngine] = {
    "lcs": LcsEngine(),
    "lookahead": LookaheadEngine(),
}


def get_engine(name: str) -> Optional[DiffEngine]:
    """Get diff engine by name.

    Args:
        name: Engine name (e.g., "lcs", "lookahead")

    Returns:
        Engine instance or None if not found
    """
    return ENGINES.get(name)
