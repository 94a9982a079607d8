"""
FastAPI application: HTTP front end for the course catalog.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

On startup the file named by ADVISING_COURSES_FILE is loaded if it exists.

Endpoints:
    POST /load              body: {"path": "...", "delimiter": ","}  (both optional;
                            path is relative to ADVISING_DATA_DIR and may not leave it)
    GET  /courses           → sorted course list + total
    GET  /courses/{number}  → title and prerequisites (case-insensitive lookup)
    GET  /health            → load state

Catalog errors come back as {"detail": message} with a status per error type.
Logs each request and wall-clock response time to stdout and logs/advising.log.
"""

import logging
import sys
import threading
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.logging_setup import setup_logging
from catalog.catalog import CourseCatalog, CourseDetail, CourseListing, LoadResult
from catalog.config import SETTINGS
from catalog.errors import (
    CatalogError,
    CourseNotFound,
    EmptyQueryKey,
    NoValidRecords,
    NotLoaded,
    SourceUnavailable,
)

setup_logging(SETTINGS.log_dir)
log = logging.getLogger("api")

ERROR_STATUS: dict[type[CatalogError], int] = {
    SourceUnavailable: 404,
    NoValidRecords:    422,
    NotLoaded:         409,
    EmptyQueryKey:     400,
    CourseNotFound:    404,
}

# Sync endpoints run in a thread pool; load rebuilds the catalog non-atomically.
_lock = threading.Lock()
_catalog = CourseCatalog(preserve_on_failure=SETTINGS.preserve_on_failure)


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_: FastAPI):
    path = SETTINGS.courses_file
    if path.exists():
        log.info("Loading course data from %s…", path)
        try:
            with _lock:
                _catalog.load_file(path, delimiter=SETTINGS.delimiter)
        except CatalogError as exc:
            log.warning("  Startup load failed: %s", exc)
    else:
        log.info("%s not found, waiting for POST /load.", path)

    yield  # server runs here


app = FastAPI(title="Advising Assistant", lifespan=lifespan)


@app.exception_handler(CatalogError)
async def catalog_error_handler(_: Request, exc: CatalogError) -> JSONResponse:
    status = ERROR_STATUS.get(type(exc), 400)
    log.info("  %s → %d: %s", type(exc).__name__, status, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class LoadRequest(BaseModel):
    path: str | None = None
    delimiter: str | None = None


class HealthResponse(BaseModel):
    loaded: bool
    source: str | None
    courses: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

def _resolve_source(raw: str) -> Path:
    """Map a client-supplied path into the data directory; refuse anything outside it."""
    path = SETTINGS.data_dir / raw
    if not path.resolve().is_relative_to(SETTINGS.data_dir.resolve()):
        log.warning("  Refused load outside %s: %r", SETTINGS.data_dir, raw)
        raise SourceUnavailable(raw, "outside the data directory")
    return path


@app.post("/load", response_model=LoadResult)
def load(req: LoadRequest | None = None) -> LoadResult:
    req = req or LoadRequest()
    path = _resolve_source(req.path) if req.path else SETTINGS.courses_file
    delimiter = req.delimiter or SETTINGS.delimiter

    t0 = time.perf_counter()
    with _lock:
        result = _catalog.load_file(path, delimiter=delimiter)
    log.info(
        "load path=%s  loaded=%d  skipped=%d  %.3fs",
        path, result.loaded, result.skipped, time.perf_counter() - t0,
    )
    return result


@app.get("/courses", response_model=CourseListing)
def list_courses() -> CourseListing:
    t0 = time.perf_counter()
    with _lock:
        listing = _catalog.list_all()
    log.info("list  total=%d  %.3fs", listing.total, time.perf_counter() - t0)
    return listing


@app.get("/courses/{number}", response_model=CourseDetail)
def describe_course(number: str) -> CourseDetail:
    t0 = time.perf_counter()
    with _lock:
        detail = _catalog.describe(number)
    log.info("describe number=%r  prereqs=%d  %.3fs", number, len(detail.prereqs), time.perf_counter() - t0)
    return detail


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    with _lock:
        return HealthResponse(
            loaded=_catalog.is_loaded, source=_catalog.source, courses=len(_catalog)
        )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    log.info("=== Advising Assistant: launching server on http://0.0.0.0:8000 ===")
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
