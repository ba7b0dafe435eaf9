"""Relay orchestration: validate, decode, dispatch, transcode."""

from typing import Any

from fastapi.responses import JSONResponse

from core.codec import PayloadCodec
from core.exceptions import RelayError, TransportFailure
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.validation import RequestValidator
from services.transcoder import ResponseTranscoder
from services.upstream import UpstreamClient

IMAGE_ROUTE = "image"
ZIP_ROUTE = "zip"


def transport_message(route: str) -> str:
    """Fixed caller-visible message for transport failures."""
    return f"Could not reach the {route} API."


class RelayService:
    """Run one relay request through the pipeline and render the response.

    Every failure is converted to a ``{"message": ...}`` JSON response here;
    nothing propagates to the ASGI layer.
    """

    def __init__(
        self,
        logger: RequestLogger,
        upstream: UpstreamClient,
        validator: RequestValidator,
        codec: PayloadCodec,
        transcoder: ResponseTranscoder,
        header_builder: HeaderBuilder,
    ) -> None:
        self._logger = logger
        self._upstream = upstream
        self._validator = validator
        self._codec = codec
        self._transcoder = transcoder
        self._headers = header_builder

    async def relay_binary(self, body: Any) -> JSONResponse:
        """Forward one payload and return ``{result, contentType}``."""
        try:
            request = self._validator.validate_binary(body)
            raw = self._codec.decode(request.payload)
            headers = self._headers.build_binary_headers(
                self._transcoder.request_content_type(request)
            )
            outcome = await self._upstream.send_binary(request.url, raw, headers)
            result = self._transcoder.binary_result(outcome, request)
        except RelayError as e:
            return self.reject(IMAGE_ROUTE, e)
        except Exception as e:
            return self._transport_failure(IMAGE_ROUTE, e)

        self._logger.log_relay(
            IMAGE_ROUTE,
            request.url,
            outcome.status,
            sent_bytes=len(raw),
            received_bytes=len(outcome.body),
        )
        return JSONResponse(result.to_json())

    async def relay_files(self, body: Any) -> JSONResponse:
        """Forward a set of files and return ``{zip, filename}``."""
        try:
            request = self._validator.validate_files(body)
            # Decode only to reject bad base64; upstream receives the text
            sent_bytes = sum(len(self._codec.decode(f.content)) for f in request.files)
            outcome = await self._upstream.send_files(
                request.url,
                [f.to_upstream() for f in request.files],
                self._headers.build_archive_headers(),
            )
            result = self._transcoder.archive_result(outcome)
        except RelayError as e:
            return self.reject(ZIP_ROUTE, e)
        except Exception as e:
            return self._transport_failure(ZIP_ROUTE, e)

        self._logger.log_relay(
            ZIP_ROUTE,
            request.url,
            outcome.status,
            sent_bytes=sent_bytes,
            received_bytes=len(outcome.body),
        )
        return JSONResponse(result.to_json())

    def reject(self, route: str, error: RelayError) -> JSONResponse:
        self._logger.log_error(route, error.status_code, error.message)
        return self._transcoder.error_response(error)

    def _transport_failure(self, route: str, exc: Exception) -> JSONResponse:
        # Exception detail goes to the operator log only
        error = TransportFailure(transport_message(route))
        self._logger.log_error(route, error.status_code, f"{type(exc).__name__}: {exc}")
        return self._transcoder.error_response(error)
