from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping

from fairrps.commit_reveal import MIN_KEY_BYTES

ENV_KEY_BYTES = "FAIRRPS_KEY_BYTES"
ENV_LOG_LEVEL = "FAIRRPS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    key_bytes: int = MIN_KEY_BYTES
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.key_bytes < MIN_KEY_BYTES:
            raise ValueError(f"key_bytes must be at least {MIN_KEY_BYTES}, got {self.key_bytes}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        key_bytes = env.get(ENV_KEY_BYTES)
        return cls(
            key_bytes=_parse_int(ENV_KEY_BYTES, key_bytes) if key_bytes else MIN_KEY_BYTES,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING"),
        )

    def with_overrides(self, *, key_bytes: int | None = None, log_level: str | None = None) -> "Settings":
        changes: dict[str, object] = {}
        if key_bytes is not None:
            changes["key_bytes"] = key_bytes
        if log_level is not None:
            changes["log_level"] = log_level
        return replace(self, **changes)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
