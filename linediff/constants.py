"""Shared constants for the linediff engine and its console output."""

# Unchanged lines shown before and after each change
CONTEXT_LINES = 3

# How far the lookahead engine scans for a line that reappears
LOOKAHEAD_WINDOW = 10

DEFAULT_ENGINE = "lcs"

# Display width constant - standardize to 80 characters max
MAX_DISPLAY_WIDTH = 80

NO_CHANGES_MESSAGE = "No changes would be made to {label}"
