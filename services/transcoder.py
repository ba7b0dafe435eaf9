"""Translate upstream outcomes and failures into caller-facing JSON."""

from fastapi.responses import JSONResponse

from core.codec import PayloadCodec
from core.config import RelaySettings
from core.exceptions import RelayError, UpstreamFailure
from core.headers import filename_from_disposition, first_present
from core.request_types import (
    ArchiveRelayResult,
    BinaryRelayResult,
    RelayRequest,
    UpstreamOutcome,
)


class ResponseTranscoder:
    """Map ``UpstreamOutcome`` values to relay results and errors to responses."""

    def __init__(self, settings: RelaySettings, codec: PayloadCodec) -> None:
        self._settings = settings
        self._codec = codec

    def request_content_type(self, request: RelayRequest) -> str:
        """Content type to send upstream for a single-payload relay."""
        return first_present(
            request.content_type,
            self._codec.media_type(request.payload),
            self._settings.default_content_type,
        )

    def binary_result(self, outcome: UpstreamOutcome, request: RelayRequest) -> BinaryRelayResult:
        """Upstream content type wins, then the request's, then the default."""
        self._raise_for_status(outcome)
        content_type = first_present(
            outcome.header("content-type"),
            self.request_content_type(request),
        )
        return BinaryRelayResult(result=self._codec.encode(outcome.body), content_type=content_type)

    def archive_result(self, outcome: UpstreamOutcome) -> ArchiveRelayResult:
        """Filename comes from Content-Disposition, else the default."""
        self._raise_for_status(outcome)
        filename = first_present(
            filename_from_disposition(outcome.header("content-disposition")),
            self._settings.default_archive_name,
        )
        return ArchiveRelayResult(zip=self._codec.encode(outcome.body), filename=filename)

    def error_response(self, error: RelayError) -> JSONResponse:
        return JSONResponse({"message": error.message}, status_code=error.status_code)

    @staticmethod
    def _raise_for_status(outcome: UpstreamOutcome) -> None:
        if not outcome.succeeded:
            raise UpstreamFailure(outcome.status)
