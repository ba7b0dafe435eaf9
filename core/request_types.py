"""Shared request and response data types."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RelayRequest:
    """Validated single-payload relay request."""

    url: str
    payload: str
    content_type: str | None = None


@dataclass(frozen=True)
class FileEntry:
    """One named file of a multi-file relay, content still base64."""

    filename: str
    content: str
    size: float | None = None
    # Entry exactly as the caller sent it; forwarded upstream unchanged
    fields: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_upstream(self) -> dict[str, Any]:
        """Wire form sent upstream: the caller's entry when there is one."""
        if self.fields:
            return dict(self.fields)
        entry: dict[str, Any] = {"filename": self.filename, "content": self.content}
        if self.size is not None:
            entry["size"] = self.size
        return entry


@dataclass(frozen=True)
class MultiFileRelayRequest:
    """Validated multi-file relay request."""

    url: str
    files: tuple[FileEntry, ...]


@dataclass(frozen=True)
class UpstreamOutcome:
    """Captured upstream response prior to transcoding."""

    succeeded: bool
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None


@dataclass(frozen=True)
class BinaryRelayResult:
    """Successful single-payload relay."""

    result: str
    content_type: str

    def to_json(self) -> dict[str, str]:
        return {"result": self.result, "contentType": self.content_type}


@dataclass(frozen=True)
class ArchiveRelayResult:
    """Successful multi-file relay."""

    zip: str
    filename: str

    def to_json(self) -> dict[str, str]:
        return {"zip": self.zip, "filename": self.filename}
