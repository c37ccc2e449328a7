from __future__ import annotations
import io
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from ..pdf import DocumentError, render_pdf
from ..settings import settings
from ..text import content_disposition, export_filename, strip_markdown

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])

VARIANTS = ("teacher", "student")


class ExportRequest(BaseModel):
	markdown: Optional[str] = None
	title: Optional[str] = None
	variant: Optional[str] = None


def _resolve_variant(variant: Optional[str]) -> str:
	value = (variant or "teacher").strip().lower()
	if value not in VARIANTS:
		raise HTTPException(status_code=400, detail=f"variant must be one of {list(VARIANTS)}")
	return value


def _require_encodable(**fields: Optional[str]) -> None:
	for name, value in fields.items():
		try:
			(value or "").encode("utf-8")
		except UnicodeEncodeError:
			raise HTTPException(status_code=400, detail=f"{name} contains characters that cannot be encoded")


def pdf_response(markdown: str, title: Optional[str], variant: Optional[str]) -> StreamingResponse:
	if not (markdown or "").strip():
		raise HTTPException(status_code=400, detail="markdown is required")
	_require_encodable(title=title, markdown=markdown)
	kind = _resolve_variant(variant)
	resolved_title = (title or "").strip() or settings.default_export_title
	try:
		data = render_pdf(resolved_title, strip_markdown(markdown))
	except DocumentError:
		logger.exception("PDF export failed for %r", resolved_title)
		raise HTTPException(status_code=500, detail="Failed to generate PDF")
	fname = export_filename(resolved_title, kind)
	return StreamingResponse(
		io.BytesIO(data),
		media_type="application/pdf",
		headers={"Content-Disposition": content_disposition(fname)},
	)


@router.post("/pdf")
async def export_pdf(req: ExportRequest):
	return pdf_response(req.markdown or "", req.title, req.variant)
