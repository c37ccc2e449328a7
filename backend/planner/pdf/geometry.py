"""Fixed page geometry shared by every export (US Letter, points)."""
from __future__ import annotations

PAGE_WIDTH = 612
PAGE_HEIGHT = 792
MARGIN = 50
MARGIN_TOP = 50

FONT_NAME = "F1"
BASE_FONT = "Helvetica"
FONT_SIZE = 12
LINE_HEIGHT = 16

# Greedy character-count wrap; Helvetica widths are not measured
MAX_COLUMNS = 88

# Title line plus two blank advances
HEADER_RESERVE = 3

LINES_PER_PAGE = (PAGE_HEIGHT - 2 * MARGIN) // LINE_HEIGHT - HEADER_RESERVE

TEXT_ORIGIN_X = MARGIN
TEXT_ORIGIN_Y = PAGE_HEIGHT - MARGIN_TOP

EMPTY_PLACEHOLDER = "(empty)"
