from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from intakeforms.exceptions import SettingsError
from intakeforms.settings import Settings, ensure_env_file_exists, get_settings

if TYPE_CHECKING:
    from pathlib import Path


def test_settings_load_from_env_file(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "APP_ENV=test\nLOG_LEVEL=DEBUG\nLOG_JSON=false\nRESULTS_DIR=out\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.app_env == "test"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.results_dir == "out"


def test_get_settings_uses_environment(monkeypatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("APP_ENV", "ci")

    settings = get_settings()
    assert settings.app_env == "ci"

    get_settings.cache_clear()


def test_get_settings_retries_after_env_template_on_missing(monkeypatch) -> None:
    get_settings.cache_clear()

    attempts = {"count": 0}

    class _DummySettings:
        app_env = "ci"

    def _fake_settings():
        attempts["count"] += 1
        if attempts["count"] == 1:
            raise ValueError("missing")
        return _DummySettings()

    copied = {"done": 0}

    def _mark_env_copied(**kwargs: object) -> None:
        _ = kwargs
        copied["done"] += 1

    monkeypatch.setattr("intakeforms.settings.Settings", _fake_settings)
    monkeypatch.setattr("intakeforms.settings._is_missing_settings_error", lambda exc: True)
    monkeypatch.setattr("intakeforms.settings.ensure_env_file_exists", _mark_env_copied)

    settings = get_settings()
    assert copied["done"] == 1
    assert attempts["count"] == 2
    assert settings.app_env == "ci"

    get_settings.cache_clear()


def test_get_settings_wraps_unexpected_errors(monkeypatch) -> None:
    get_settings.cache_clear()

    def _fake_settings():
        raise ValueError("broken")

    monkeypatch.setattr("intakeforms.settings.Settings", _fake_settings)

    with pytest.raises(SettingsError, match="broken"):
        get_settings()

    get_settings.cache_clear()


def test_ensure_env_file_exists_copies_template(tmp_path: Path) -> None:
    template = tmp_path / ".env.template"
    template.write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    env_path = tmp_path / ".env"

    ensure_env_file_exists(env_path=env_path, template_path=template)

    assert env_path.read_text(encoding="utf-8") == "LOG_LEVEL=DEBUG\n"


def test_ensure_env_file_exists_keeps_existing_file(tmp_path: Path) -> None:
    template = tmp_path / ".env.template"
    template.write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    env_path = tmp_path / ".env"
    env_path.write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")

    ensure_env_file_exists(env_path=env_path, template_path=template)

    assert env_path.read_text(encoding="utf-8") == "LOG_LEVEL=ERROR\n"
