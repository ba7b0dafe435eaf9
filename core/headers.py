"""Header construction and header-derived fallbacks."""

JSON_CONTENT_TYPE = "application/json"
FILENAME_TOKEN = "filename="


def first_present(*candidates: str | None) -> str | None:
    """Return the first non-empty candidate, in order."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def filename_from_disposition(disposition: str | None) -> str | None:
    """Text after ``filename=`` up to the next parameter, quotes removed."""
    if not disposition or FILENAME_TOKEN not in disposition:
        return None
    value = disposition.split(FILENAME_TOKEN, 1)[1].split(";", 1)[0]
    return value.replace('"', "").strip() or None


class HeaderBuilder:
    """Build outbound headers for each relay."""

    def build_binary_headers(self, content_type: str) -> dict[str, str]:
        """Single-payload relay: declare the payload's content type."""
        return {"Content-Type": content_type}

    def build_archive_headers(self) -> dict[str, str]:
        """Multi-file relay: the files travel as a JSON document."""
        return {"Content-Type": JSON_CONTENT_TYPE}
