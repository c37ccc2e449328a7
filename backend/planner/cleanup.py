from __future__ import annotations
import logging
from datetime import datetime, timedelta
from sqlalchemy import delete
from sqlalchemy.orm import Session

from .models import SavedLesson
from .settings import settings

logger = logging.getLogger(__name__)


def purge_stale_lessons(db: Session, days: int | None = None) -> int:
	days = settings.lesson_retention_days if days is None else days
	if days <= 0:
		return 0
	threshold = datetime.utcnow() - timedelta(days=days)
	res = db.execute(delete(SavedLesson).where(SavedLesson.updated_at < threshold))
	db.commit()
	removed = res.rowcount or 0
	if removed:
		logger.info("purged %d lesson(s) not updated in %d days", removed, days)
	return removed
