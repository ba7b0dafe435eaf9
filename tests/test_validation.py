"""Inbound body validation for both relays."""

import pytest

from core.exceptions import ValidationFailure
from core.request_types import FileEntry
from core.validation import MISSING_FILES_MESSAGE, MISSING_IMAGE_MESSAGE, RequestValidator

validator = RequestValidator()


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        "text",
        {},
        {"url": "https://x/invert"},
        {"payload": "AAAA"},
        {"url": "", "payload": "AAAA"},
        {"url": "https://x/invert", "payload": ""},
        {"url": 5, "payload": "AAAA"},
    ],
)
def test_binary_rejects_incomplete_bodies(body):
    with pytest.raises(ValidationFailure) as exc_info:
        validator.validate_binary(body)
    assert exc_info.value.message == MISSING_IMAGE_MESSAGE
    assert exc_info.value.status_code == 400


def test_binary_accepts_legacy_image_field():
    request = validator.validate_binary({"url": "https://x", "image": "AAAA"})
    assert request.payload == "AAAA"
    assert request.content_type is None


def test_binary_keeps_content_type():
    request = validator.validate_binary(
        {"url": "https://x", "payload": "AAAA", "contentType": "image/jpeg"}
    )
    assert request.content_type == "image/jpeg"


@pytest.mark.parametrize(
    "body",
    [
        None,
        {"url": "https://x/zip"},
        {"url": "https://x/zip", "files": []},
        {"url": "https://x/zip", "files": "a.txt"},
        {"files": [{"filename": "a.txt", "content": "SGVsbG8="}]},
        {"url": "https://x/zip", "files": ["a.txt"]},
        {"url": "https://x/zip", "files": [{"filename": "a.txt"}]},
    ],
)
def test_files_rejects_incomplete_bodies(body):
    with pytest.raises(ValidationFailure) as exc_info:
        validator.validate_files(body)
    assert exc_info.value.message == MISSING_FILES_MESSAGE


def test_files_preserves_order_and_duplicates():
    request = validator.validate_files(
        {
            "url": "https://x/zip",
            "files": [
                {"filename": "b.txt", "content": "Yg==", "size": 1},
                {"filename": "a.txt", "content": "YQ=="},
                {"filename": "a.txt", "content": "YQ=="},
            ],
        }
    )
    assert request.files == (
        FileEntry("b.txt", "Yg==", 1),
        FileEntry("a.txt", "YQ=="),
        FileEntry("a.txt", "YQ=="),
    )


def test_file_entry_omits_missing_size_upstream():
    assert FileEntry("a.txt", "YQ==").to_upstream() == {"filename": "a.txt", "content": "YQ=="}
    assert FileEntry("a.txt", "YQ==", 1).to_upstream()["size"] == 1


def test_file_entry_keeps_caller_fields():
    item = {"filename": "a.txt", "content": "SGVsbG8=", "size": 5.0, "type": "text/plain"}

    request = validator.validate_files({"url": "https://x/zip", "files": [item]})

    assert request.files[0].size == 5.0
    assert request.files[0].to_upstream() == item
