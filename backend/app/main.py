# backend/app/main.py

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as SA_TimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import (
    api_assessment,
    api_client,
    api_estimate,
    api_modifier,
    api_organization,
    api_public,
    api_service,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import Base, engine
from .middleware.security_headers import SecurityHeadersMiddleware
from . import models  # noqa: F401  registers tables on Base.metadata

setup_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

_BOOT_TS = time.time()

# Always use ORJSONResponse for JSON payloads to ensure consistent, fast
# serialization across all endpoints.
app = FastAPI(title="Detailing Assessments API", default_response_class=ORJSONResponse)


def _normalize_origins(origins) -> list[str]:
    merged: list[str] = []
    for origin in origins:
        if not origin:
            continue
        normalized = origin.rstrip("/")
        if normalized not in merged:
            merged.append(normalized)
    return merged


ALLOWED_ORIGINS = _normalize_origins(settings.CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", ALLOWED_ORIGINS)
app.add_middleware(SecurityHeadersMiddleware)


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Return JSON responses for HTTP errors and log them."""
    try:
        response = await call_next(request)
    except StarletteHTTPException as exc:  # return the original status and detail
        logger.error(
            "HTTP error %s at %s: %s", exc.status_code, request.url.path, exc.detail
        )
        response = ORJSONResponse(
            status_code=exc.status_code, content={"detail": exc.detail}
        )
    except SA_TimeoutError as exc:  # DB pool timeout -> 503 to reduce retry storms
        logger.error("DB timeout at %s: %s", request.url.path, str(exc))
        response = ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database busy, please retry"},
        )
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": errors},
    )


@app.get("/healthz", tags=["health"])
def healthz():
    """Report process uptime and whether the database answers."""
    started = time.perf_counter()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check DB ping failed: %s", exc)
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "db": "unreachable"},
            headers={"Cache-Control": "no-store"},
        )
    return ORJSONResponse(
        content={
            "status": "ok",
            "db": "ok",
            "db_ping_ms": round((time.perf_counter() - started) * 1000, 1),
            "uptime_s": round(time.time() - _BOOT_TS, 1),
        },
        headers={"Cache-Control": "no-store"},
    )


api_prefix = settings.API_V1_STR  # usually "/api/v1"

app.include_router(api_estimate.router, prefix=f"{api_prefix}/estimates", tags=["estimates"])
app.include_router(
    api_organization.router, prefix=f"{api_prefix}/organizations", tags=["organizations"]
)
app.include_router(api_service.router, prefix=f"{api_prefix}/services", tags=["services"])
app.include_router(api_modifier.router, prefix=f"{api_prefix}/modifiers", tags=["modifiers"])
app.include_router(api_client.router, prefix=f"{api_prefix}/clients", tags=["clients"])
app.include_router(
    api_assessment.router, prefix=f"{api_prefix}/assessments", tags=["assessments"]
)
app.include_router(api_public.router, prefix=f"{api_prefix}/public", tags=["public"])


@app.get("/")
def root():
    return {"message": "Detailing Assessments API"}
