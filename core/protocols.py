"""Shared protocol definitions."""

from typing import Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard)."""

    def log_relay(
        self,
        route: str,
        url: str,
        status: int,
        *,
        sent_bytes: int,
        received_bytes: int,
    ) -> None: ...
    def log_error(self, route: str, status: int, message: str) -> None: ...
