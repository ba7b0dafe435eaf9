"""Shared logging utilities."""

import json
import shutil
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

LOG_ROOT = Path.cwd() / "logs"
CLI_LOG_NAME = "relay.log"

# Base64 fields are cut to this many characters in request logs
PREVIEW_CHARS = 64
ENCODED_FIELDS = ("payload", "image", "content")


def write_incoming_log(
    method: str,
    path: str,
    headers: dict[str, str],
    body: Any,
    *,
    log_root: Path | None = None,
) -> Path:
    """Write a single incoming request log entry."""
    payload = {
        "timestamp": _utc_now(),
        "method": method,
        "path": path,
        "headers": _redact_headers(headers),
        "body": summarize_body(body),
    }
    return _write_json((log_root or LOG_ROOT) / "incoming", payload)


def summarize_body(body: Any) -> Any:
    """Copy of a request body with base64 fields shortened."""
    if isinstance(body, str):
        return _truncate(body)
    if not isinstance(body, dict):
        return body

    summary = {}
    for key, value in body.items():
        if key in ENCODED_FIELDS and isinstance(value, str):
            summary[key] = _truncate(value)
        elif key == "files" and isinstance(value, list):
            summary[key] = [summarize_body(item) for item in value]
        else:
            summary[key] = value
    return summary


def write_cli_log(
    level: str,
    message: str,
    **extra: Any,
) -> None:
    """Append a line to the rolling CLI log file."""
    log_file = LOG_ROOT / CLI_LOG_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
    extra_str = " ".join(f"{k}={v}" for k, v in extra.items()) if extra else ""
    line = f"[{timestamp}] {level}: {message}"
    if extra_str:
        line += f" {extra_str}"
    line += "\n"
    with log_file.open("a") as f:
        f.write(line)


def clear_logs() -> None:
    """Remove logs left by a previous run."""
    if LOG_ROOT.exists():
        shutil.rmtree(LOG_ROOT)


def _write_json(folder: Path, payload: dict[str, Any]) -> Path:
    """Write payload to a unique JSON file in the given folder."""
    folder.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S.%fZ")
    file_path = folder / f"{timestamp}_{uuid4().hex}.json"
    file_path.write_text(json.dumps(payload, indent=2, default=str))
    return file_path


def _truncate(value: str) -> str:
    if len(value) <= PREVIEW_CHARS:
        return value
    return f"{value[:PREVIEW_CHARS]}... ({len(value)} chars)"


def _redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers."""
    redacted = {}
    for key, value in headers.items():
        if "key" in key.lower() or "authorization" in key.lower() or key.lower() == "cookie":
            redacted[key] = _mask(value)
        else:
            redacted[key] = value
    return redacted


def _mask(value: str) -> str:
    if len(value) <= 10:
        return "***"
    return value[:6] + "..." + value[-4:]


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()
