"""Tests for .env loading and settings."""

import os
from pathlib import Path

from csbalancing.env import Settings, get_settings, load_env


class TestLoadEnv:
    def test_loads_dotenv_from_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CSB_TEST_VALUE", raising=False)
        (tmp_path / ".env").write_text("# comment\nCSB_TEST_VALUE=from-file\n")

        load_env()

        assert os.environ["CSB_TEST_VALUE"] == "from-file"
        monkeypatch.delenv("CSB_TEST_VALUE")

    def test_existing_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CSB_TEST_VALUE", "from-env")
        (tmp_path / ".env").write_text("CSB_TEST_VALUE=from-file\n")

        load_env()

        assert os.environ["CSB_TEST_VALUE"] == "from-env"

    def test_missing_file_is_fine(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        load_env()


class TestGetSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CSB_LOG_CONSOLE", raising=False)
        assert get_settings() == Settings(log_level="INFO", log_dir=None, log_console=True)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("CSB_LOG_LEVEL", "warning")
        monkeypatch.setenv("CSB_LOG_DIR", "/var/log/csb")
        monkeypatch.setenv("CSB_LOG_CONSOLE", "no")

        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.log_dir == Path("/var/log/csb")
        assert settings.log_console is False
