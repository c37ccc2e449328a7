from __future__ import annotations
import logging
import re
from typing import List

from .errors import InvariantViolation
from .objects import CATALOG_ID, DocumentObject

logger = logging.getLogger(__name__)

HEADER = b"%PDF-1.4\n"
FREE_ENTRY = b"0000000000 65535 f \n"

_REFERENCE_RE = re.compile(rb"(\d+) 0 R\b")


def check_identifiers(objects: List[DocumentObject]) -> None:
	expected = list(range(1, len(objects) + 1))
	actual = [obj.ident for obj in objects]
	if actual != expected:
		raise InvariantViolation("serialize", f"object identifiers must be dense and 1-based, got {actual}")


def check_references(objects: List[DocumentObject]) -> None:
	known = {obj.ident for obj in objects}
	for obj in objects:
		# Stream payloads hold drawing operators, not object syntax
		head = obj.body.split(b"\nstream\n", 1)[0]
		for match in _REFERENCE_RE.finditer(head):
			target = int(match.group(1))
			if target not in known:
				raise InvariantViolation(
					"serialize",
					f"object {obj.ident} references object {target}, which does not exist",
				)


def serialize(objects: List[DocumentObject]) -> bytes:
	"""Emit header, objects, cross-reference table and trailer.

	Offsets are taken from the bytes actually written, so each xref entry
	points at the first byte of its ``<id> 0 obj`` line.
	"""
	check_identifiers(objects)
	check_references(objects)

	buf = bytearray(HEADER)
	offsets: List[int] = []
	for obj in objects:
		offsets.append(len(buf))
		buf += f"{obj.ident} 0 obj\n".encode("ascii")
		buf += obj.body
		buf += b"\nendobj\n"

	xref_offset = len(buf)
	size = len(objects) + 1
	buf += f"xref\n0 {size}\n".encode("ascii")
	buf += FREE_ENTRY
	for offset in offsets:
		buf += f"{offset:010d} 00000 n \n".encode("ascii")
	buf += f"trailer\n<< /Size {size} /Root {CATALOG_ID} 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode("ascii")
	logger.debug("serialized %d object(s) into %d bytes", len(objects), len(buf))
	return bytes(buf)
