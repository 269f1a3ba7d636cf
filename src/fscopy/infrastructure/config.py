"""Configuration: FSCOPY_* settings from the environment or a .env file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel

from fscopy.errors import PreconditionError

MetadataMode = Literal["none", "mode", "all"]

SETTING_KEYS = ["FSCOPY_LOG_LEVEL", "FSCOPY_COPY_METADATA"]


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the requested keys from ``.env`` in the working directory.

    Values are never exported to os.environ. Blank lines, ``#`` comments,
    lines without ``=`` and empty values are skipped; one layer of matching
    quotes is stripped.
    """
    try:
        content = (Path.cwd() / ".env").read_text()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key, value = key.strip(), value.strip()
        if key not in wanted:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        if value:
            result[key] = value

    return result


class CopySettings(BaseModel):
    log_level: str = "INFO"
    copy_metadata: MetadataMode = "mode"  # matches the native copy primitive


def load_settings() -> CopySettings:
    """Build settings from FSCOPY_* variables; the environment wins over .env.

    Raises PreconditionError for an unknown FSCOPY_COPY_METADATA mode.
    """
    env_config = read_env_file(SETTING_KEYS)

    def lookup(key: str) -> str | None:
        return os.environ.get(key) or env_config.get(key)

    settings = CopySettings()

    log_level = lookup("FSCOPY_LOG_LEVEL")
    if log_level:
        settings.log_level = log_level.strip().upper()

    metadata = lookup("FSCOPY_COPY_METADATA")
    if metadata:
        metadata = metadata.strip().lower()
        modes = get_args(MetadataMode)
        if metadata not in modes:
            raise PreconditionError(f"FSCOPY_COPY_METADATA must be one of {', '.join(modes)} (got {metadata!r})")
        settings.copy_metadata = metadata  # type: ignore[assignment]

    return settings
