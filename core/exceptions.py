"""Exception hierarchy for the payload relay.

Every caller-visible failure is a ``RelayError`` carrying the HTTP status it
is rendered with.
"""


class RelayError(Exception):
    """Base exception for all relay failures.

    Attributes:
        message: Caller-visible message
        status_code: HTTP status the failure is reported with
    """

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(RelayError):
    """Raised when a required field is missing or the body is not JSON."""

    status_code = 400


class RequestTooLarge(RelayError):
    """Request body exceeds size limit."""

    status_code = 413


class UpstreamFailure(RelayError):
    """Raised when the upstream answers with a non-success status.

    Attributes:
        upstream_status: Status code returned by the upstream
    """

    status_code = 502

    def __init__(self, upstream_status: int) -> None:
        super().__init__(f"Upstream request failed with {upstream_status}.")
        self.upstream_status = upstream_status


class TransportFailure(RelayError):
    """Raised when decoding, dispatching or encoding fails outright.

    The message is fixed per relay; the underlying exception is kept on
    ``__cause__`` for the operator log.
    """

    status_code = 500


class PayloadDecodeError(ValueError):
    """Transport-encoded text could not be decoded back to bytes."""
