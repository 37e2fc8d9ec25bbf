# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .routes import payment_schedule
from .schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mortgage Calculator API",
    description="Periodic mortgage payment quotes with mortgage insurance",
    version="0.1.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods are both reported as Not Found."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        body = ErrorResponse(error="Not Found")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.body())
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.body())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = ErrorResponse(error=payment_schedule.INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.body())


app.include_router(payment_schedule.router, tags=["payment schedule"])
