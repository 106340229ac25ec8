"""Configuration for the file explorer.

Settings come from, in order of precedence: explicit keyword arguments (CLI flags),
a JSON file (``appsettings.json`` in the working directory, or the file named by
``FILEEXPLORER_CONFIG``), then ``FILEEXPLORER_*`` environment variables.

The only required option is the home directory. It is canonicalized at load and the
canonical form is used for every containment check afterwards.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fileexplorer.core.context import canonical_root

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "appsettings.json"
CONFIG_ENV_VAR = "FILEEXPLORER_CONFIG"


def get_config_path() -> Path:
    """Location of the JSON settings file (it may not exist)."""
    return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)).expanduser()


class Settings(BaseSettings):
    """Process-wide settings, immutable once the server has started."""

    model_config = SettingsConfigDict(
        env_prefix="FILEEXPLORER_",
        populate_by_name=True,
        extra="ignore",
    )

    home_directory: Path = Field(
        validation_alias=AliasChoices(
            "HomeDirectory", "home_directory", "FILEEXPLORER_HOME_DIRECTORY"
        ),
        description="Directory served to clients. Required.",
    )
    host: str = "127.0.0.1"
    port: int = Field(default=5120, ge=1, le=65535)
    route_prefix: str = "/test"
    cors_allowed_origins: list[str] = Field(default_factory=list)
    max_upload_bytes: int | None = Field(default=None, gt=0)
    copy_chunk_size: int = Field(default=64 * 1024, gt=0)
    ssl_certfile: Path | None = None
    ssl_keyfile: Path | None = None
    log_level: str = "INFO"

    @field_validator("home_directory")
    @classmethod
    def _canonical_home(cls, value: Path) -> Path:
        try:
            return canonical_root(value)
        except OSError as e:
            raise ValueError(f"HomeDirectory is not usable: {e}") from e

    @field_validator("route_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().strip("/")
        return f"/{value}" if value else ""

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def load(cls, config_path: str | Path | None = None, **overrides: Any) -> Settings:
        """Build settings from the JSON file (if present), env and *overrides*.

        ``None`` overrides are ignored so unset CLI flags do not mask other sources.
        """
        path = Path(config_path) if config_path else get_config_path()
        data: dict[str, Any] = {}
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"Config file {path} must contain a JSON object")
            logger.debug("Loaded settings from %s", path)
        if "HomeDirectory" in data:
            data.setdefault("home_directory", data.pop("HomeDirectory"))
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


@lru_cache
def get_settings() -> Settings:
    """Cached settings for the running process."""
    return Settings.load()
