"""HTTP error mapping shared by the shop and ordering APIs.

- DomainError → 400 (404 when the code names a missing aggregate) with
  ``{"error": {"code", "message"}}``
- requests.RequestException from a fact provider → 502
- everything else Protean raises → Protean's stock handlers
"""

import requests
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shared.errors import DomainError

logger = structlog.get_logger(__name__)


def domain_error_response(exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=404 if exc.is_not_found else 400,
        content={"error": {"code": exc.code, "message": exc.message}},
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        logger.info(
            "Request rejected by domain rule",
            path=request.url.path,
            code=exc.code,
            message=exc.message,
        )
        return domain_error_response(exc)

    @app.exception_handler(requests.RequestException)
    async def handle_fact_provider_failure(request: Request, exc: requests.RequestException) -> JSONResponse:
        logger.error("External fact provider unavailable", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=502,
            content={"error": {"code": "FACT-PROVIDER-UNAVAILABLE", "message": str(exc)}},
        )
