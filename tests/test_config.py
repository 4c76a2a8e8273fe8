from __future__ import annotations

import logging

import pytest

from fairrps.config import ENV_KEY_BYTES, ENV_LOG_LEVEL, Settings


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings.key_bytes == 32
    assert settings.log_level_value == logging.WARNING


def test_from_env() -> None:
    settings = Settings.from_env({ENV_KEY_BYTES: "64", ENV_LOG_LEVEL: "debug"})
    assert settings.key_bytes == 64
    assert settings.log_level_value == logging.DEBUG


@pytest.mark.parametrize(
    "env",
    [{ENV_KEY_BYTES: "16"}, {ENV_KEY_BYTES: "lots"}, {ENV_LOG_LEVEL: "chatty"}],
)
def test_from_env_rejects_bad_values(env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        Settings.from_env(env)


def test_overrides_take_precedence() -> None:
    settings = Settings.from_env({ENV_KEY_BYTES: "40"}).with_overrides(key_bytes=48, log_level="INFO")
    assert settings.key_bytes == 48
    assert settings.log_level == "INFO"
    assert Settings().with_overrides() == Settings()
