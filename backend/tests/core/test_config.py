"""Tests for application configuration."""
import pytest

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_single_origin_string(self) -> None:
        """Single origin string is parsed correctly."""
        settings = Settings(
            database_url="postgresql://test",
            cors_origins_str="http://localhost:5173",
        )
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_parse_multiple_origins_with_whitespace(self) -> None:
        """Comma-separated origins are split and stripped."""
        settings = Settings(
            database_url="postgresql://test",
            cors_origins_str="  http://localhost:5173 , https://example.com  ",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        settings = Settings(database_url="postgresql://test", cors_origins_str="")
        assert settings.cors_origins == []

    def test_parse_trailing_comma(self) -> None:
        """Trailing comma is handled (empty entries filtered)."""
        settings = Settings(
            database_url="postgresql://test",
            cors_origins_str="http://localhost:5173,",
        )
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_reads_cors_origins_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CORS_ORIGINS environment variable populates the origins."""
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com,https://b.example.com")
        settings = Settings(_env_file=None, database_url="postgresql://test")
        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]


class TestDefaults:
    """Tests for default settings values."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Optional settings fall back to their defaults."""
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None, database_url="postgresql://test")
        assert settings.cors_origins == ["http://localhost:5173"]
        assert settings.log_level == "INFO"
        assert settings.db_echo is False
        assert settings.db_pool_pre_ping is True

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL environment variable sets the log level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None, database_url="postgresql://test")
        assert settings.log_level == "DEBUG"
