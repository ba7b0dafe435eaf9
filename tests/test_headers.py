"""Outbound headers and header-derived fallbacks."""

import pytest

from core.headers import HeaderBuilder, filename_from_disposition, first_present


def test_first_present_skips_empty_candidates():
    assert first_present(None, "", "image/jpeg", "image/png") == "image/jpeg"


def test_first_present_returns_none_when_all_empty():
    assert first_present(None, "") is None


@pytest.mark.parametrize(
    ("disposition", "expected"),
    [
        ('attachment; filename="custom.zip"', "custom.zip"),
        ("attachment; filename=plain.zip", "plain.zip"),
        ('attachment; filename="out.zip"; size=10', "out.zip"),
        ("attachment", None),
        ("", None),
        (None, None),
        ('attachment; filename=""', None),
    ],
)
def test_filename_from_disposition(disposition, expected):
    assert filename_from_disposition(disposition) == expected


def test_archive_headers_are_json():
    assert HeaderBuilder().build_archive_headers() == {"Content-Type": "application/json"}


def test_binary_headers_carry_content_type():
    assert HeaderBuilder().build_binary_headers("image/gif") == {"Content-Type": "image/gif"}
