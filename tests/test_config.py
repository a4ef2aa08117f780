"""Tests for config parsing."""

from pathlib import Path
from unittest.mock import patch

from cadence.config import DATA_DIR, Config, load_config


def load_from(tmp_path, text: str) -> Config:
    config_file = tmp_path / "cadence.conf"
    config_file.write_text(text)
    with patch("cadence.config.CONFIG_FILE", config_file):
        return load_config()


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        with patch("cadence.config.CONFIG_FILE", tmp_path / "missing.conf"):
            config = load_config()
        assert config == Config()
        assert config.quote_window == 30
        assert config.suggestion_window == 3

    def test_parses_supabase_settings(self, tmp_path):
        config = load_from(
            tmp_path,
            "\n".join(
                [
                    "# backend",
                    "BACKEND=supabase",
                    'SUPABASE_URL="https://example.supabase.co/"  # project',
                    "SUPABASE_KEY='anon'",
                    "SUPABASE_ACCESS_TOKEN=token # inline comment",
                    "USER_ID=user-1",
                ]
            ),
        )
        assert config.backend == "supabase"
        assert config.supabase_url == "https://example.supabase.co"
        assert config.supabase_key == "anon"
        assert config.supabase_access_token == "token"
        assert config.user_id == "user-1"

    def test_unknown_backend_keeps_default(self, tmp_path):
        assert load_from(tmp_path, "BACKEND=sqlite").backend == "file"

    def test_window_sizes(self, tmp_path):
        config = load_from(tmp_path, "QUOTE_WINDOW=10\nSUGGESTION_WINDOW=5")
        assert config.quote_window == 10
        assert config.suggestion_window == 5

    def test_bad_window_keeps_default(self, tmp_path):
        config = load_from(tmp_path, "QUOTE_WINDOW=lots\nSUGGESTION_WINDOW=0")
        assert config.quote_window == 30
        assert config.suggestion_window == 3

    def test_ignores_lines_without_equals(self, tmp_path):
        assert load_from(tmp_path, "nonsense\nUSER_ID=u").user_id == "u"


class TestConfigPaths:
    def test_default_data_path(self):
        assert Config().data_path == DATA_DIR / "tracker.json"

    def test_quote_state_defaults_to_data_dir(self):
        assert Config().quote_state_path == DATA_DIR / "quote.json"

    def test_quote_state_beside_data_file(self, tmp_path):
        config = Config(data_file=str(tmp_path / "habits" / "tracker.json"))
        assert config.quote_state_path == tmp_path / "habits" / "quote.json"

    def test_data_file_expands_user(self):
        config = Config(data_file="~/habits.json")
        assert config.data_path == Path.home() / "habits.json"
