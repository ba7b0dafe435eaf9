"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_binary_relay, handle_files_relay, handle_health
from core.codec import PayloadCodec
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.validation import RequestValidator
from services.relay_service import RelayService
from services.transcoder import ResponseTranscoder
from services.upstream import UpstreamClient


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network transport of the shared upstream
    client (tests pass an ``httpx.MockTransport``).
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(
            max_connections=config.upstream.max_connections,
            max_keepalive_connections=config.upstream.max_keepalive_connections,
        )
        client = httpx.AsyncClient(
            timeout=config.upstream.timeout,
            limits=limits,
            transport=transport,
        )
        codec = PayloadCodec()
        app.state.relay_service = RelayService(
            logger=logger,
            upstream=UpstreamClient(client),
            validator=RequestValidator(),
            codec=codec,
            transcoder=ResponseTranscoder(config.relay, codec),
            header_builder=HeaderBuilder(),
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="Payload Relay", version="0.1.0", lifespan=lifespan)

    @app.post("/api/invert-image")
    async def relay_image(request: Request):
        return await handle_binary_relay(request, config)

    @app.post("/api/zip-files")
    async def relay_zip(request: Request):
        return await handle_files_relay(request, config)

    @app.get("/healthz")
    async def health(request: Request):
        return await handle_health(request)

    return app
