"""
Tests for Configuration

Tests for defaults and environment overrides.
"""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_client.config import APIConfig, Config, LogConfig


ENV_VARS = [
    "POSTS_CLIENT_BASE_URL",
    "POSTS_CLIENT_TIMEOUT_SECONDS",
    "POSTS_CLIENT_PLATFORM",
    "POSTS_CLIENT_AUTH_TOKEN",
    "POSTS_CLIENT_LOG_LEVEL",
    "POSTS_CLIENT_LOG_DIRECTORY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Start every test without POSTS_CLIENT_* variables or a stray .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfig:
    """Tests for the settings models."""

    def test_defaults(self):
        config = Config.from_env()

        assert config.api.base_url == "https://jsonplaceholder.typicode.com"
        assert config.api.timeout_seconds == 10.0
        assert config.api.platform == "Python"
        assert config.api.auth_token == "1212121212"
        assert config.log.log_level == "INFO"
        assert config.log.log_file_path == Path("logs") / "posts_client.log"

    def test_instances_are_independent(self):
        first = Config()
        second = Config()
        first.api.base_url = "https://changed.example.test"

        assert second.api.base_url == "https://jsonplaceholder.typicode.com"

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("POSTS_CLIENT_BASE_URL", "https://posts.example.test")
        monkeypatch.setenv("POSTS_CLIENT_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("POSTS_CLIENT_PLATFORM", "Linux")
        monkeypatch.setenv("POSTS_CLIENT_AUTH_TOKEN", "abc")
        monkeypatch.setenv("POSTS_CLIENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("POSTS_CLIENT_LOG_DIRECTORY", "/var/log/posts")

        config = Config.from_env()

        assert config.api.base_url == "https://posts.example.test"
        assert config.api.timeout_seconds == 2.5
        assert config.api.platform == "Linux"
        assert config.api.auth_token == "abc"
        assert config.log.log_level == "DEBUG"
        assert config.log.log_directory == Path("/var/log/posts")

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("POSTS_CLIENT_PLATFORM=FromFile\n", encoding="utf-8")
        assert Config.from_env().api.platform == "FromFile"

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("POSTS_CLIENT_PLATFORM", "Linux")
        assert APIConfig(platform="Explicit").platform == "Explicit"

    @pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
    def test_rejects_bad_timeout(self, monkeypatch, timeout):
        monkeypatch.setenv("POSTS_CLIENT_TIMEOUT_SECONDS", timeout)
        with pytest.raises(ValidationError):
            Config.from_env()

    @pytest.mark.parametrize("level", ["verbose", "", "trace"])
    def test_rejects_unknown_log_level(self, monkeypatch, level):
        monkeypatch.setenv("POSTS_CLIENT_LOG_LEVEL", level)
        with pytest.raises(ValidationError):
            Config.from_env()

    def test_log_level_is_normalized(self):
        assert LogConfig(log_level="warning").log_level == "WARNING"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
