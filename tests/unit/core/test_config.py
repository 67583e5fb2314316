"""
Unit tests for core.config.
"""

from __future__ import annotations

import pytest

from core import config
from core.config import AppSettings, _parse_env_lines, write_user_env_vars


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.api_base_url.endswith("/")
    assert settings.token_key == "token"
    assert settings.heading_selector == "h1"


def test_base_url_gets_trailing_slash():
    settings = AppSettings(_env_file=None, api_base_url="https://api.example.test/v2")
    assert settings.api_base_url == "https://api.example.test/v2/"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("AUTH_BOOTSTRAP_TOKEN_KEY", "jwt")
    assert AppSettings(_env_file=None).token_key == "jwt"


def test_storage_path_defaults_to_user_config_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path)
    settings = AppSettings(_env_file=None)
    assert settings.resolved_storage_path() == tmp_path / "storage.json"


def test_explicit_storage_path(tmp_path):
    settings = AppSettings(_env_file=None, storage_path=tmp_path / "s.json")
    assert settings.resolved_storage_path() == tmp_path / "s.json"


def test_parse_env_lines_skips_comments_and_quotes():
    parsed = _parse_env_lines('# c\nA=1\nB="two"\nnot-a-pair\n\n')
    assert parsed == {"A": "1", "B": "two"}


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "get_user_env_file", lambda: tmp_path / ".env")
    write_user_env_vars({"A": "1"})
    path = write_user_env_vars({"B": "2"})
    assert _parse_env_lines(path.read_text(encoding="utf-8")) == {"A": "1", "B": "2"}


def test_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_dotenv_files_do_not_leak_into_tests(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("AUTH_BOOTSTRAP_HEADING_SELECTOR=#leak\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert AppSettings().heading_selector == "h1"


def test_dotenv_is_read_when_enabled(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AUTH_BOOTSTRAP_HEADING_SELECTOR=#title\n", encoding="utf-8")
    assert AppSettings(_env_file=env_file).heading_selector == "#title"
