"""Inbound request validation - runs before any network I/O."""

from typing import Any

from core.exceptions import ValidationFailure
from core.request_types import FileEntry, MultiFileRelayRequest, RelayRequest

MISSING_IMAGE_MESSAGE = "Missing url or image payload."
MISSING_FILES_MESSAGE = "Missing url or files payload."


class RequestValidator:
    """Check the shape of parsed JSON bodies for each relay."""

    def validate_binary(self, body: Any) -> RelayRequest:
        """Require ``url`` and ``payload`` (or legacy ``image``)."""
        if not isinstance(body, dict):
            raise ValidationFailure(MISSING_IMAGE_MESSAGE)

        url = body.get("url")
        payload = body.get("payload") or body.get("image")
        if not _non_empty_str(url) or not _non_empty_str(payload):
            raise ValidationFailure(MISSING_IMAGE_MESSAGE)

        content_type = body.get("contentType")
        if not _non_empty_str(content_type):
            content_type = None
        return RelayRequest(url=url, payload=payload, content_type=content_type)

    def validate_files(self, body: Any) -> MultiFileRelayRequest:
        """Require ``url`` and a non-empty ``files`` list of file objects."""
        if not isinstance(body, dict):
            raise ValidationFailure(MISSING_FILES_MESSAGE)

        url = body.get("url")
        files = body.get("files")
        if not _non_empty_str(url) or not isinstance(files, list) or not files:
            raise ValidationFailure(MISSING_FILES_MESSAGE)

        return MultiFileRelayRequest(url=url, files=tuple(self._file_entry(f) for f in files))

    @staticmethod
    def _file_entry(item: Any) -> FileEntry:
        if not isinstance(item, dict):
            raise ValidationFailure(MISSING_FILES_MESSAGE)
        filename = item.get("filename")
        content = item.get("content")
        if not isinstance(filename, str) or not isinstance(content, str):
            raise ValidationFailure(MISSING_FILES_MESSAGE)

        size = item.get("size")
        # bool is an int subclass
        if not isinstance(size, (int, float)) or isinstance(size, bool):
            size = None
        return FileEntry(filename=filename, content=content, size=size, fields=item)


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)
