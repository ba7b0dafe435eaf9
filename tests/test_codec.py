"""Base64 transport encoding."""

import os

import pytest

from core.codec import PayloadCodec
from core.exceptions import PayloadDecodeError

codec = PayloadCodec()


@pytest.mark.parametrize(
    "raw",
    [b"", b"\x00\x00\x00", b"\xff\xfe\x00\x01", bytes(range(256)), os.urandom(4097)],
)
def test_decode_reverses_encode(raw):
    assert codec.decode(codec.encode(raw)) == raw


def test_encode_is_standard_base64():
    assert codec.encode(b"Hello") == "SGVsbG8="
    assert codec.encode(b"\x00\x00\x00") == "AAAA"


def test_decode_rejects_invalid_text():
    with pytest.raises(PayloadDecodeError):
        codec.decode("not base64!!")


def test_decode_rejects_bad_padding():
    with pytest.raises(PayloadDecodeError):
        codec.decode("SGVsbG8")


def test_decode_rejects_non_string():
    with pytest.raises(PayloadDecodeError):
        codec.decode(123)


def test_decode_accepts_data_url():
    assert codec.decode("data:image/jpeg;base64,AAAA") == b"\x00\x00\x00"


def test_media_type_from_data_url():
    assert codec.media_type("data:image/webp;base64,AAAA") == "image/webp"
    assert codec.media_type("AAAA") is None
