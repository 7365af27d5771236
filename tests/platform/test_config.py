"""
Tests for shiptivity_platform.runtime.config.
"""

from pathlib import Path

from shiptivity_platform.runtime.config import (
    API_PREFIX,
    DB_FILE,
    DEFAULT_PORT,
    get_cors_origins,
    get_db_path,
    get_log_level,
)


class TestConfigConstants:

    def test_api_prefix(self):
        assert API_PREFIX == "/api/v1"

    def test_default_port_is_positive(self):
        assert isinstance(DEFAULT_PORT, int)
        assert DEFAULT_PORT > 0


class TestDbPath:

    def test_defaults_to_cwd(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SHIPTIVITY_DB_PATH", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_db_path() == tmp_path / DB_FILE

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SHIPTIVITY_DB_PATH", "/data/board.db")
        assert get_db_path() == Path("/data/board.db")

    def test_blank_env_is_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHIPTIVITY_DB_PATH", "  ")
        monkeypatch.chdir(tmp_path)
        assert get_db_path() == tmp_path / DB_FILE


class TestCorsOrigins:

    def test_default_allows_all(self, monkeypatch):
        monkeypatch.delenv("SHIPTIVITY_CORS_ORIGINS", raising=False)
        assert get_cors_origins() == ["*"]

    def test_comma_separated(self, monkeypatch):
        monkeypatch.setenv("SHIPTIVITY_CORS_ORIGINS", "http://a.test, http://b.test,")
        assert get_cors_origins() == ["http://a.test", "http://b.test"]


def test_log_level_env(monkeypatch):
    monkeypatch.setenv("SHIPTIVITY_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
    monkeypatch.delenv("SHIPTIVITY_LOG_LEVEL")
    assert get_log_level() == "INFO"
