import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .cleanup import purge_stale_lessons
from .db import Base, SessionLocal, engine
from .pdf import geometry
from .routers import export, lessons
from .settings import settings

logging.basicConfig(
	level=getattr(logging, settings.log_level.upper(), logging.INFO),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _run_cleanup() -> None:
	db = SessionLocal()
	try:
		purge_stale_lessons(db)
	except Exception:
		logger.exception("lesson cleanup failed")
	finally:
		db.close()


async def _cleanup_watcher():
	# Daily after the startup pass
	while True:
		await asyncio.sleep(24 * 60 * 60)
		_run_cleanup()


@asynccontextmanager
async def lifespan(app: FastAPI):
	Base.metadata.create_all(bind=engine)
	_run_cleanup()
	task = asyncio.create_task(_cleanup_watcher())
	yield
	task.cancel()
	try:
		await task
	except asyncio.CancelledError:
		pass


app = FastAPI(title="Lesson Plan Export API", lifespan=lifespan)
app.include_router(export.router)
app.include_router(lessons.router)


@app.get("/info")
def info():
	return {
		"status": "ok",
		"lines_per_page": geometry.LINES_PER_PAGE,
		"max_columns": geometry.MAX_COLUMNS,
	}
