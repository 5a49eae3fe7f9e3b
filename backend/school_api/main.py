"""FastAPI application entrypoint.

This module builds the school records API: CORS, request-context
logging, error translation and the resource routers.

Endpoints implemented:
- POST/GET /teachers, GET/PUT/DELETE /teachers/{id}
- POST/GET /students, GET/PUT/DELETE /students/{id}
- GET /health

Every failure becomes one of two responses: 404 `{"message": "Not
found"}` for a missing record, or 500 `{"error": <message>}` for
anything else, including bodies and path ids that fail to parse.
"""

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .config import settings
from .database import create_db_and_tables
from .routes import students_router, teachers_router
from .services import RecordNotFound

app = FastAPI(title="School Records API")
logger = logging.getLogger("school_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local frontends working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


def _request_log_payload(request: Request, req_id: str, started: float, **extra) -> str:
    data = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client": request.client.host if request.client else "unknown",
    }
    data.update(extra)
    return json.dumps(data, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception as exc:
        logger.exception("request_failed %s", _request_log_payload(request, req_id, started))
        response = JSONResponse(status_code=500, content={"error": str(exc)})
    response.headers["X-Request-ID"] = req_id
    logger.info(
        "request_done %s",
        _request_log_payload(request, req_id, started, status_code=response.status_code),
    )
    return response


@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=404, content={"message": "Not found"})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable requests as 500s; the API has no 4xx validation kind."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=500, content={"error": message or "invalid request"})


app.include_router(teachers_router)
app.include_router(students_router)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok", "env": settings.ENV}
