"""Base64 transport encoding for binary payloads carried in JSON."""

import base64
import binascii

from core.exceptions import PayloadDecodeError

DATA_URL_PREFIX = "data:"
DATA_URL_MARKER = ";base64,"


class PayloadCodec:
    """Convert between base64 text and raw bytes."""

    def decode(self, encoded: str) -> bytes:
        """Decode base64 text, or a base64 data URL, to bytes."""
        if not isinstance(encoded, str):
            raise PayloadDecodeError(f"Expected base64 text, got {type(encoded).__name__}")
        _, text = self._split_data_url(encoded)
        try:
            return base64.b64decode(text.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise PayloadDecodeError(f"Invalid base64 payload: {e}") from e

    def encode(self, raw: bytes) -> str:
        """Encode bytes as standard base64 ASCII text."""
        return base64.b64encode(raw).decode("ascii")

    def media_type(self, encoded: str) -> str | None:
        """Media type declared by a data URL, or None for bare base64."""
        media_type, _ = self._split_data_url(encoded)
        return media_type

    @staticmethod
    def _split_data_url(encoded: str) -> tuple[str | None, str]:
        """Split ``data:<mime>;base64,<text>`` into its media type and text."""
        if not encoded.startswith(DATA_URL_PREFIX) or DATA_URL_MARKER not in encoded:
            return None, encoded
        header, text = encoded.split(DATA_URL_MARKER, 1)
        media_type = header[len(DATA_URL_PREFIX):].split(";", 1)[0].strip()
        return media_type or None, text
