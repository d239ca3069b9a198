import sys
import time
from typing import Callable

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from congress_lookup.api.api import api_router
from congress_lookup.config import get_settings
from congress_lookup.core.errors import ClassifiedError
from congress_lookup.core.logging_config import get_logger, setup_logging
from congress_lookup.models.core import ErrorKind

VERSION = "1.0.0"

settings = get_settings()

# Configure logging early
setup_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    include_timestamp=True,
    upstream_log_level=settings.upstream_log_level,
)
logger = get_logger(__name__)

logger.info("=" * 60)
logger.info(f"Python version: {sys.version}")
logger.info(f"Application: {settings.app_name}")
logger.info(f"Log level: {settings.log_level}")
logger.info("=" * 60)

app = FastAPI(
    title=settings.app_name,
    description="Congressional district and member lookup API",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next: Callable) -> Response:
    """Log all incoming HTTP requests with timing information."""
    start_time = time.time()

    logger.info(
        f"Request: {request.method} {request.url.path} "
        f"| Client: {request.client.host if request.client else 'unknown'}"
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"Response: {request.method} {request.url.path} "
        f"| Status: {response.status_code} | Time: {process_time:.3f}s"
    )

    response.headers["X-Process-Time"] = str(process_time)

    return response


@app.exception_handler(ClassifiedError)
async def classified_error_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
    """Render a classified error as its translation key."""
    logger.warning(
        f"Lookup failed: path={request.url.path}, key={exc.translation_key}, "
        f"status={exc.status_code}, reason={exc.reason}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any other failure is reported to callers as UNKNOWN."""
    logger.error(
        f"Unhandled error: path={request.url.path}, error={type(exc).__name__}: {str(exc)}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=ClassifiedError(ErrorKind.UNKNOWN).to_body())


@app.on_event("startup")
async def on_startup() -> None:
    """Create the shared upstream HTTP client."""
    logger.info("Starting FastAPI application...")
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        follow_redirects=True,
    )
    logger.info(f"Congress session: {settings.congress_number}")
    logger.info(f"Roster API key configured: {bool(settings.propublica_api_key)}")
    logger.info("FastAPI application started successfully")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """Close the shared upstream HTTP client."""
    await app.state.http_client.aclose()
    logger.info("Upstream HTTP client closed")


@app.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    logger.debug("Health check endpoint called")
    return {"status": "ok", "version": VERSION}


app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
