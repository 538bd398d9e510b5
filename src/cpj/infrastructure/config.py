"""Configuration constants, .env parsing, and per-run copy options."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

ENV_KEYS = ["CPJ_JOBS", "CPJ_CONTINUE"]


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the requested keys from ./.env without touching os.environ.

    A missing or unreadable file yields an empty dict.
    """
    try:
        content = (Path.cwd() / ".env").read_text()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or key.startswith("#") or key not in wanted:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        if value:
            result[key] = value
    return result


def parse_jobs(raw: str | None) -> int:
    """Worker count from a setting; anything unusable means one worker."""
    try:
        return max(1, int(raw or "1"))
    except ValueError:
        return 1


def parse_flag(raw: str | None) -> bool:
    return (raw or "").strip().lower() == "true"


# os.environ wins over .env
_env_config = read_env_file(ENV_KEYS)

DEFAULT_JOBS: int = parse_jobs(os.environ.get("CPJ_JOBS") or _env_config.get("CPJ_JOBS"))
DEFAULT_CONTINUE: bool = parse_flag(os.environ.get("CPJ_CONTINUE") or _env_config.get("CPJ_CONTINUE"))


class CopyOptions(BaseModel):
    """Policy flags for one tree copy."""

    model_config = ConfigDict(frozen=True)

    hardlink: bool = False
    recurse: bool = False
    continue_on_error: bool = DEFAULT_CONTINUE
    jobs: int = Field(default=DEFAULT_JOBS, ge=1)
    useful: bool = False
    verbose: bool = False
    debug: bool = False

    @model_validator(mode="before")
    @classmethod
    def _cascade_verbosity(cls, data: Any) -> Any:
        # debug implies verbose, verbose implies useful
        if isinstance(data, dict):
            data = dict(data)
            if data.get("debug"):
                data["verbose"] = True
            if data.get("verbose"):
                data["useful"] = True
        return data

    @property
    def log_level(self) -> str | None:
        """Log level the CLI flags ask for, or None to defer to LOG_LEVEL."""
        if self.debug:
            return "DEBUG"
        if self.verbose:
            return "INFO"
        return None
