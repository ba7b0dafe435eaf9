"""Configuration models and loading."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

CONFIG_DIR = Path.home() / ".config" / "payload-relay"
CONFIG_FILE = CONFIG_DIR / "config.json"


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080
    keep_alive_timeout: int = 5


class RelaySettings(BaseModel):
    default_content_type: str = "image/png"
    default_archive_name: str = "result.zip"
    max_body_size: int = 50 * 1024 * 1024  # 50MB


class UpstreamSettings(BaseModel):
    # None leaves outbound calls unbounded
    timeout: float | None = None
    max_connections: int = 100
    max_keepalive_connections: int = 20


class Config(BaseModel):
    server: ServerSettings = Field(default_factory=ServerSettings)
    relay: RelaySettings = Field(default_factory=RelaySettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)


def load_config(config_file: Path = CONFIG_FILE) -> Config:
    """Load configuration from JSON file, creating default if needed."""
    if not config_file.exists():
        config_file.parent.mkdir(parents=True, exist_ok=True)
        default = Config()
        config_file.write_text(default.model_dump_json(indent=2))
        return default

    try:
        data = json.loads(config_file.read_text())
        return Config.model_validate(data)
    except (json.JSONDecodeError, ValidationError):
        # Backup corrupted config and recreate default
        backup = config_file.with_suffix(".json.bak")
        config_file.rename(backup)
        default = Config()
        config_file.write_text(default.model_dump_json(indent=2))
        return default
