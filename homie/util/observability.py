"""Logfire setup and instrumentation.

Services emit events and spans directly:

    logfire.info("Cast published", signer_uuid=truncate_id(uuid), hash=cast_hash)

    with logfire.span("signer_service.register_signer", signer_uuid=...):
        ...

Never pass secrets as attributes: run metadata through
``homie.util.redact.redact`` and shorten identifiers with ``truncate_id``.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from homie.config import Settings
from homie.util.redact import REDACTED, is_sensitive

SERVICE_NAME = "homie-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names Logfire scrubs on top of its defaults
SCRUB_PATTERNS = ["mnemonic", "private_?key", "api-key"]


def should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def logfire_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for ``logfire.configure``."""
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha
        if settings.git_sha != "unknown"
        else SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": should_send(settings),
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token
    return options


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process or a script.

    Args:
        settings: Application settings
    """
    options = logfire_options(settings)
    logfire.configure(**options)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=options["send_to_logfire"],
        integrations=settings.integrations,
    )


def map_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Mask credential-looking request attributes and add routing context.

    WebSocket scopes have no ``method``, so each field is added only when
    the request carries it.
    """
    result = {
        key: REDACTED if is_sensitive(str(key)) else value
        for key, value in attributes.items()
    }

    method = getattr(request, "method", None)
    if method:
        result["method"] = method

    url = getattr(request, "url", None)
    if url is not None:
        result["path"] = url.path

    client = getattr(request, "client", None)
    if client:
        result["client_host"] = client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace inbound requests with credentials masked."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace curated-list queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound calls to the hosted API, hub, imgbb and the preferences server."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
