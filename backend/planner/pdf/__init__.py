"""Minimal text-only PDF encoder used for lesson plan exports."""
from __future__ import annotations
import logging

from .errors import DocumentError, InvariantViolation
from .layout import layout
from .objects import build
from .serializer import serialize

logger = logging.getLogger(__name__)

__all__ = ["DocumentError", "InvariantViolation", "layout", "build", "serialize", "render_pdf"]


def render_pdf(title: str, text: str) -> bytes:
	"""Lay out ``text`` under ``title`` and return the finished PDF bytes."""
	try:
		pages = layout(text)
		objects = build(title, pages)
		return serialize(objects)
	except DocumentError as err:
		logger.error("PDF generation failed at %s stage: %s", err.stage, err.message)
		raise
