"""Outbound HTTP dispatch to caller-supplied upstream URLs."""

from typing import Any

import httpx

from core.request_types import UpstreamOutcome


class UpstreamClient:
    """Issue exactly one POST per relay and capture the raw response.

    Non-success statuses come back as an unsuccessful ``UpstreamOutcome``.
    ``httpx.RequestError`` (DNS, refused connection, timeout, TLS, broken
    response) propagates to the caller.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send_binary(
        self,
        url: str,
        body: bytes,
        headers: dict[str, str],
    ) -> UpstreamOutcome:
        """POST raw bytes."""
        response = await self._client.post(url, content=body, headers=headers)
        return self._outcome(response)

    async def send_files(
        self,
        url: str,
        files: list[dict[str, Any]],
        headers: dict[str, str],
    ) -> UpstreamOutcome:
        """POST ``{"files": [...]}`` as JSON."""
        response = await self._client.post(url, json={"files": files}, headers=headers)
        return self._outcome(response)

    @staticmethod
    def _outcome(response: httpx.Response) -> UpstreamOutcome:
        return UpstreamOutcome(
            succeeded=response.is_success,
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
