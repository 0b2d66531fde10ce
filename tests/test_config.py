from __future__ import annotations

from pathlib import Path

from core.config import AppSettings, get_user_config_dir


def test_defaults(monkeypatch):
    for key in ("DAILY_PUZZLES_HTTP_TIMEOUT_SECONDS", "DAILY_PUZZLES_WORDLE_URL", "DAILY_PUZZLES_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.http_timeout_seconds == 20.0
    assert settings.user_agent.startswith("Mozilla/5.0")
    assert settings.wordle_url == "https://wordfinder.yourdictionary.com/wordle/answers/"
    assert settings.sudoku_url == "https://www.nytimes.com/puzzles/sudoku/hard"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DAILY_PUZZLES_HTTP_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("daily_puzzles_sudoku_url", "https://sudoku.test/hard")
    settings = AppSettings(_env_file=None)
    assert settings.http_timeout_seconds == 3.5
    assert settings.sudoku_url == "https://sudoku.test/hard"


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == Path(tmp_path) / "daily-puzzles"
