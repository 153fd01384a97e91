from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.adapters.api.controllers.stations import router as stations_router
from src.domain.exceptions import NoPathFound, StationNotFound, TimetableError

app = FastAPI(title="Timetable Router")
app.include_router(stations_router)
app.include_router(routes_router)


def _reveal_errors() -> bool:
    raw = os.getenv("TIMETABLE_REVEAL_ERRORS") or ""
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@app.exception_handler(StationNotFound)
async def station_not_found_handler(
    request: Request, exc: StationNotFound
) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(NoPathFound)
async def no_path_found_handler(request: Request, exc: NoPathFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(TimetableError)
async def timetable_error_handler(
    request: Request, exc: TimetableError
) -> JSONResponse:
    logging.getLogger("uvicorn.error").error("Timetable rejected: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer with the same `{"detail": ...}` body as the 404 handlers.

    Route clients read `detail` on every failure. Messages are hidden unless
    TIMETABLE_REVEAL_ERRORS is set, except for configuration errors such as
    a missing timetable file or cache bucket.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if _reveal_errors() or isinstance(exc, (FileNotFoundError, RuntimeError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
