"""FastAPI route handlers."""

import json
from json import JSONDecodeError
from typing import Any

from fastapi import Request, Response

from core.config import Config
from core.exceptions import RequestTooLarge
from services.relay_service import IMAGE_ROUTE, ZIP_ROUTE
from ui.log_utils import write_incoming_log

# Stands in for a body that is missing or not JSON; the validator rejects it
INVALID_BODY = None


async def _parse_json_body(request: Request, config: Config) -> Any:
    """Parse request body as JSON, or return ``INVALID_BODY``."""
    raw_body = await request.body()
    if len(raw_body) > config.relay.max_body_size:
        raise RequestTooLarge("Request body too large.")

    text_body = raw_body.decode("utf-8", errors="replace")
    try:
        body = json.loads(text_body)
    except (JSONDecodeError, ValueError, RecursionError):
        write_incoming_log(request.method, request.url.path, dict(request.headers), text_body)
        return INVALID_BODY

    write_incoming_log(request.method, request.url.path, dict(request.headers), body)
    return body


async def handle_binary_relay(request: Request, config: Config) -> Response:
    """Handle the single-payload relay endpoint."""
    relay_service = request.app.state.relay_service
    try:
        body = await _parse_json_body(request, config)
    except RequestTooLarge as e:
        return relay_service.reject(IMAGE_ROUTE, e)
    return await relay_service.relay_binary(body)


async def handle_files_relay(request: Request, config: Config) -> Response:
    """Handle the multi-file relay endpoint."""
    relay_service = request.app.state.relay_service
    try:
        body = await _parse_json_body(request, config)
    except RequestTooLarge as e:
        return relay_service.reject(ZIP_ROUTE, e)
    return await relay_service.relay_files(body)


async def handle_health(_request: Request) -> Response:
    """Liveness probe."""
    return Response(content='{"status": "ok"}', media_type="application/json")
