# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_api.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.reload is False
    assert settings.log_file is None


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASK_API_PORT", "8080")
    monkeypatch.setenv("TASK_API_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_reads_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("TASK_API_PORT=9000\n", encoding="utf-8")

    assert Settings().port == 9000
