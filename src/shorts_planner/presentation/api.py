"""
FastAPI Presentation Layer — REST API for the planner.

Usage:
    shorts-planner serve --port 8000
    POST http://localhost:8000/api/generate {"niche": "finance", "tone": "calm"}

Responses:
    200 {"usingAI": bool, "plan": {...}}
    400 {"error": "Invalid request", "details": {"formErrors": [], "fieldErrors": {}}}
    500 {"error": "..."}
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from shorts_planner import __version__
from shorts_planner.application.delivery import GENERIC_FAILURE
from shorts_planner.core.config import Settings
from shorts_planner.core.container import Container
from shorts_planner.core.logging import setup_logging
from shorts_planner.domain.exceptions import PlanGenerationError, RequestValidationError

log = logging.getLogger(__name__)

T = TypeVar("T")

DISCONNECT_POLL_SECONDS = 0.25
CLIENT_CLOSED_REQUEST = 499


class ClientDisconnected(Exception):
    """Raised when the caller goes away before the plan is ready."""


async def run_until_disconnect(
    request: Request, work: Awaitable[T], poll_interval: float = DISCONNECT_POLL_SECONDS
) -> T:
    """Await ``work``, cancelling it if the HTTP client disconnects first.

    Args:
        request: Inbound request whose connection is watched.
        work: Coroutine producing the response data.
        poll_interval: Seconds between disconnect checks.

    Raises:
        ClientDisconnected: If the client disconnected; ``work`` is cancelled.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                log.warning("Client disconnected, cancelling generation")
                task.cancel()
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


def _invalid_request(details: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if omitted).
        container: Pre-built container, mainly for tests.

    Returns:
        FastAPI application instance.
    """
    if container is None:
        container = Container(settings or Settings())
    settings = container.settings
    setup_logging(settings.log_level, settings.log_file)

    service = container.delivery_service()

    app = FastAPI(
        title="Shorts Planner",
        description="Short-video production plans from a content brief",
        version=__version__,
    )

    @app.get("/health")
    async def health() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "shorts-planner", "usingAI": service.using_ai}

    @app.post("/api/generate")
    async def generate(request: Request) -> Response:
        """Turn a content brief into a production plan."""
        try:
            payload = await request.json()
        except ValueError:
            return _invalid_request({"formErrors": ["Body must be valid JSON"], "fieldErrors": {}})

        try:
            result = await run_until_disconnect(request, service.deliver(payload))
        except RequestValidationError as e:
            return _invalid_request(e.flatten())
        except PlanGenerationError as e:
            return JSONResponse(status_code=500, content={"error": str(e)})
        except ClientDisconnected:
            return Response(status_code=CLIENT_CLOSED_REQUEST)
        except Exception:
            log.exception("Unexpected planner failure")
            return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})

        log.info("Delivered plan (%s)", result.provenance.display_name)
        return JSONResponse(content=result.to_payload())

    return app
