"""Helpers that turn generated Markdown into export-ready plain text and filenames."""
from __future__ import annotations
import re
import urllib.parse

from .settings import settings

# Common UTF-8-read-as-cp1252 artifacts seen in model output
_MOJIBAKE = [
	("â€”", "—"),
	("â€“", "–"),
	("â€œ", '"'),
	("â€\x9d", '"'),
	("â€™", "'"),
	("â€˜", "'"),
	("â€¦", "..."),
	("Ã—", "×"),
	("Â\u00a0", " "),
	("\u00a0", " "),
]

_HEADING = re.compile(r"^[ \t]{0,3}#{1,6}[ \t]*", re.MULTILINE)
_BULLET = re.compile(r"^([ \t]*)[*+][ \t]+", re.MULTILINE)
_EMPHASIS = re.compile(r"(\*{1,3}|_{2,3})(\S(?:.*?\S)?)\1")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_CODE = re.compile(r"`{1,3}([^`]+)`{1,3}")
_BLANK_RUN = re.compile(r"\n{3,}")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def strip_markdown(markdown: str) -> str:
	text = (markdown or "").replace("\r\n", "\n")
	for bad, good in _MOJIBAKE:
		text = text.replace(bad, good)
	text = _HEADING.sub("", text)
	text = _BULLET.sub(r"\1- ", text)
	text = _LINK.sub(r"\1", text)
	text = _CODE.sub(r"\1", text)
	text = _EMPHASIS.sub(r"\2", text)
	text = _BLANK_RUN.sub("\n\n", text)
	return text.strip()


def export_filename(title: str, variant: str, extension: str = "pdf") -> str:
	stem = _NON_ALNUM.sub("_", title or "").strip("_")
	stem = stem[: settings.filename_max_length].rstrip("_") or "lesson_plan"
	return f"{stem}-{variant}.{extension}"


def content_disposition(filename: str) -> str:
	ascii_name = filename.encode("ascii", errors="replace").decode("ascii").replace('"', "")
	return f'attachment; filename="{ascii_name}"; filename*=UTF-8\'\'{urllib.parse.quote(filename)}'
