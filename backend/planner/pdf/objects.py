from __future__ import annotations
import logging
import re
from typing import Dict, List, NamedTuple

from .errors import DocumentError, InvariantViolation
from .geometry import (
	BASE_FONT,
	FONT_NAME,
	FONT_SIZE,
	LINE_HEIGHT,
	PAGE_HEIGHT,
	PAGE_WIDTH,
	TEXT_ORIGIN_X,
	TEXT_ORIGIN_Y,
)
from .layout import Page

logger = logging.getLogger(__name__)

CATALOG_ID = 1
PAGES_ID = 2

CATALOG = "catalog"
PAGES = "pages"
PAGE = "page"
CONTENT = "content"
FONT = "font"

_LENGTH_RE = re.compile(rb"^<< /Length (\d+) >>\nstream\n")
_STREAM_END = b"\nendstream"


class DocumentObject(NamedTuple):
	ident: int
	kind: str
	body: bytes


def escape_text(text: str) -> str:
	return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def page_id(index: int) -> int:
	return PAGES_ID + 1 + 2 * index


def content_id(index: int) -> int:
	return page_id(index) + 1


def font_id(page_count: int) -> int:
	return PAGES_ID + 1 + 2 * page_count


def content_program(title: str, lines: Page) -> bytes:
	ops: List[str] = [
		"BT",
		f"/{FONT_NAME} {FONT_SIZE} Tf",
		f"{LINE_HEIGHT} TL",
		f"{TEXT_ORIGIN_X} {TEXT_ORIGIN_Y} Td",
		f"({escape_text(title)}) Tj",
		"T*",
		"T*",
	]
	for line in lines:
		ops.append(f"({escape_text(line)}) Tj")
		ops.append("T*")
	ops.append("ET")
	try:
		return ("\n".join(ops) + "\n").encode("utf-8")
	except UnicodeEncodeError as err:
		raise DocumentError("build", f"text is not encodable as UTF-8: {err.reason} at position {err.start}") from err


def stream_body(program: bytes) -> bytes:
	return f"<< /Length {len(program)} >>\nstream\n".encode("ascii") + program + _STREAM_END


def check_stream_length(obj: DocumentObject) -> None:
	"""Raise if a content stream's declared /Length differs from its payload size."""
	match = _LENGTH_RE.match(obj.body)
	if match is None or not obj.body.endswith(_STREAM_END):
		raise InvariantViolation("build", f"object {obj.ident} is not a well-formed stream")
	declared = int(match.group(1))
	actual = len(obj.body) - match.end() - len(_STREAM_END)
	if declared != actual:
		raise InvariantViolation(
			"build",
			f"object {obj.ident} declares /Length {declared} but carries {actual} bytes",
		)


def build(title: str, pages: List[Page]) -> List[DocumentObject]:
	"""Turn laid-out pages into the document's object graph, in identifier order.

	Identifiers: catalog 1, page tree 2, then a (page, content stream) pair per
	page, then the shared font last.
	"""
	count = len(pages)
	font = font_id(count)
	kids = " ".join(f"{page_id(i)} 0 R" for i in range(count))

	objects: List[DocumentObject] = [
		DocumentObject(CATALOG_ID, CATALOG, f"<< /Type /Catalog /Pages {PAGES_ID} 0 R >>".encode("ascii")),
		DocumentObject(PAGES_ID, PAGES, f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode("ascii")),
	]
	for index, lines in enumerate(pages):
		page_body = (
			f"<< /Type /Page /Parent {PAGES_ID} 0 R /MediaBox [0 0 {PAGE_WIDTH} {PAGE_HEIGHT}] "
			f"/Resources << /Font << /{FONT_NAME} {font} 0 R >> >> /Contents {content_id(index)} 0 R >>"
		)
		objects.append(DocumentObject(page_id(index), PAGE, page_body.encode("ascii")))
		stream = DocumentObject(content_id(index), CONTENT, stream_body(content_program(title, lines)))
		check_stream_length(stream)
		objects.append(stream)
	objects.append(
		DocumentObject(font, FONT, f"<< /Type /Font /Subtype /Type1 /BaseFont /{BASE_FONT} >>".encode("ascii"))
	)
	logger.debug("built %d object(s) for %d page(s)", len(objects), count)
	return objects


def bodies(objects: List[DocumentObject]) -> Dict[int, bytes]:
	return {obj.ident: obj.body for obj in objects}
