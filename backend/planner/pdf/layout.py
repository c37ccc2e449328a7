from __future__ import annotations
import logging
from typing import List

from .errors import DocumentError
from .geometry import EMPTY_PLACEHOLDER, LINES_PER_PAGE, MAX_COLUMNS

logger = logging.getLogger(__name__)

Page = List[str]


def wrap_line(line: str, max_columns: int = MAX_COLUMNS) -> List[str]:
	# Hard split at the column budget, no word-boundary awareness
	if len(line) <= max_columns:
		return [line]
	return [line[i:i + max_columns] for i in range(0, len(line), max_columns)]


def wrap_text(text: str, max_columns: int = MAX_COLUMNS) -> List[str]:
	if not text:
		return []
	wrapped: List[str] = []
	for raw in text.split("\n"):
		wrapped.extend(wrap_line(raw.rstrip("\r"), max_columns))
	return wrapped


def paginate(lines: List[str], lines_per_page: int = LINES_PER_PAGE) -> List[Page]:
	if not lines:
		return [[EMPTY_PLACEHOLDER]]
	return [lines[i:i + lines_per_page] for i in range(0, len(lines), lines_per_page)]


def layout(text: str, max_columns: int = MAX_COLUMNS, lines_per_page: int = LINES_PER_PAGE) -> List[Page]:
	"""Wrap ``text`` to ``max_columns`` and split the result into pages.

	Each source line is wrapped on its own. Empty text still yields one page
	holding a placeholder line.
	"""
	if max_columns < 1:
		raise DocumentError("layout", f"max_columns must be >= 1, got {max_columns}")
	if lines_per_page < 1:
		raise DocumentError("layout", f"lines_per_page must be >= 1, got {lines_per_page}")
	pages = paginate(wrap_text(text, max_columns), lines_per_page)
	logger.debug("layout produced %d page(s)", len(pages))
	return pages
