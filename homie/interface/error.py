"""Interface layer error handling.

Domain, adapter and configuration errors are raised freely below the
routes and translated to JSON responses here. Every error body has the
shape ``{error, details?, code?, field?}``.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from homie.adapter.error import UpstreamError
from homie.domain.error import AuthError, NotFoundError, ValidationError
from homie.util.error import ConfigurationError
from homie.util.redact import redact


def error_body(
    error: str,
    details: Any = None,
    code: str | None = None,
    field: str | None = None,
) -> dict[str, Any]:
    """Build an error response body, omitting empty members."""
    body: dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    if code is not None:
        body["code"] = code
    if field is not None:
        body["field"] = field
    return body


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logfire.warn(
        "Validation failed", path=request.url.path, field=exc.field, error=exc.message
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, field=exc.field),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map FastAPI body/query parsing failures onto the 400 error shape."""
    errors = exc.errors()
    field = None
    if errors:
        location = [
            str(part)
            for part in errors[0].get("loc", ())
            if part not in ("body", "query", "path")
        ]
        field = ".".join(location) or None
    logfire.warn("Request validation failed", path=request.url.path, field=field)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Invalid request",
            details=[{"loc": e.get("loc"), "msg": e.get("msg")} for e in errors],
            field=field,
        ),
    )


async def handle_auth_error(
    request: Request, exc: AuthError
) -> JSONResponse:
    logfire.warn(
        "Authentication failed",
        path=request.url.path,
        code=exc.code,
        status_code=exc.status_code,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, code=exc.code),
    )


async def handle_not_found_error(
    request: Request, exc: NotFoundError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(f"{exc.resource} not found"),
    )


async def handle_upstream_error(
    request: Request, exc: UpstreamError
) -> JSONResponse:
    """Relay the upstream status and body to the caller."""
    logfire.error(
        "Upstream request failed",
        path=request.url.path,
        service=exc.service,
        status_code=exc.status_code,
        details=redact(exc.details),
    )
    # Upstream 2xx/3xx never reach here; anything outside 4xx/5xx is a gateway fault
    status_code = exc.status_code if 400 <= exc.status_code < 600 else 502
    return JSONResponse(
        status_code=status_code,
        content=error_body(str(exc), details=exc.details),
    )


async def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logfire.error("Server misconfigured", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server configuration error", details=str(exc)),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthError, handle_auth_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
    app.add_exception_handler(ConfigurationError, handle_configuration_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
