from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import SavedLesson
from ..settings import settings
from .export import pdf_response

router = APIRouter(prefix="/lessons", tags=["lessons"])


class LessonCreate(BaseModel):
	title: Optional[str] = None
	markdown: str


class LessonUpdate(BaseModel):
	title: Optional[str] = None
	markdown: Optional[str] = None


class LessonOut(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	title: str
	markdown: str
	created_at: datetime
	updated_at: datetime


def _get_or_404(db: Session, lesson_id: int) -> SavedLesson:
	row = db.get(SavedLesson, lesson_id)
	if row is None:
		raise HTTPException(status_code=404, detail="Lesson not found")
	return row


@router.post("", response_model=LessonOut, status_code=201)
async def create_lesson(req: LessonCreate, db: Session = Depends(get_db)):
	if not req.markdown.strip():
		raise HTTPException(status_code=400, detail="markdown is required")
	title = (req.title or "").strip() or settings.default_export_title
	row = SavedLesson(title=title, markdown=req.markdown)
	db.add(row)
	db.commit()
	db.refresh(row)
	return row


@router.get("", response_model=List[LessonOut])
async def list_lessons(db: Session = Depends(get_db)):
	return db.query(SavedLesson).order_by(SavedLesson.updated_at.desc(), SavedLesson.id.desc()).all()


@router.get("/{lesson_id}", response_model=LessonOut)
async def get_lesson(lesson_id: int, db: Session = Depends(get_db)):
	return _get_or_404(db, lesson_id)


@router.put("/{lesson_id}", response_model=LessonOut)
async def update_lesson(lesson_id: int, req: LessonUpdate, db: Session = Depends(get_db)):
	row = _get_or_404(db, lesson_id)
	if req.markdown is not None:
		if not req.markdown.strip():
			raise HTTPException(status_code=400, detail="markdown must not be blank")
		row.markdown = req.markdown
	if req.title is not None and req.title.strip():
		row.title = req.title.strip()
	db.add(row)
	db.commit()
	db.refresh(row)
	return row


@router.delete("/{lesson_id}", status_code=204)
async def delete_lesson(lesson_id: int, db: Session = Depends(get_db)):
	row = _get_or_404(db, lesson_id)
	db.delete(row)
	db.commit()
	return Response(status_code=204)


@router.get("/{lesson_id}/export/pdf")
async def export_lesson_pdf(lesson_id: int, variant: Optional[str] = None, db: Session = Depends(get_db)):
	row = _get_or_404(db, lesson_id)
	return pdf_response(row.markdown, row.title, variant)
