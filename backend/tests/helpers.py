import io
import re

from pypdf import PdfReader

_XREF_ENTRY = re.compile(rb"^(\d{10}) (\d{5}) ([nf]) \n$")


def read_pdf(data: bytes) -> PdfReader:
	return PdfReader(io.BytesIO(data), strict=True)


def shown_strings(page) -> list:
	"""Operands of every Tj operator on a page, in drawing order."""
	return [operands[0] for operands, op in page.get_contents().operations if op == b"Tj"]


def parse_xref(data: bytes):
	"""Return (xref_offset, entries) read straight from the trailer and table."""
	tail = data[data.rindex(b"startxref\n"):]
	xref_offset = int(tail.split(b"\n")[1])
	header, count, *_ = data[xref_offset:].split(b"\n", 2)
	assert header == b"xref"
	first, size = (int(x) for x in count.split())
	assert first == 0
	table_start = xref_offset + len(b"xref\n") + len(count) + 1
	entries = []
	for i in range(size):
		raw = data[table_start + 20 * i: table_start + 20 * (i + 1)]
		m = _XREF_ENTRY.match(raw)
		assert m is not None, raw
		entries.append((int(m.group(1)), int(m.group(2)), m.group(3).decode("ascii")))
	return xref_offset, entries
