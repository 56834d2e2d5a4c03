"""Tests for config system."""

import json
from pathlib import Path

import pytest

from picklist.config import Config, clear_config_cache, get_default_config_dir


class TestConfigDefaults:
    def test_default_styles(self):
        config = Config(Path("/tmp/picklist-test-nonexistent"))
        assert config.cursor_style == "white on black"
        assert config.selected_style == "white on blue"

    def test_default_toggles(self):
        config = Config(Path("/tmp/picklist-test-nonexistent"))
        assert config.transient is False

    def test_unknown_attribute(self):
        config = Config(Path("/tmp/picklist-test-nonexistent"))
        with pytest.raises(AttributeError):
            config.no_such_setting


class TestConfigDir:
    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PICKLIST_CONFIG_DIR", str(tmp_path))
        assert get_default_config_dir() == tmp_path

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("PICKLIST_CONFIG_DIR", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_default_config_dir() == tmp_path / ".config" / "picklist"


class TestConfigLoad:
    def test_load_from_file(self, tmp_path: Path):
        config_dir = tmp_path / "picklist"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(
            json.dumps({"transient": True, "cursor_style": "reverse"})
        )

        config = Config.load(config_dir)

        assert config.transient is True
        assert config.cursor_style == "reverse"

    def test_load_nonexistent_uses_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path / "nonexistent")
        assert config.log_level == "WARNING"

    def test_corrupted_config_loads_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("{ invalid json }")
        config = Config.load(tmp_path)
        assert config.cursor_style == "white on black"

    def test_empty_config_file_loads_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("")
        config = Config.load(tmp_path)
        assert config.transient is False

    def test_default_dir_is_cached(self):
        assert Config.load() is Config.load()
        clear_config_cache()
        assert Config.load() is not None


class TestConfigEnvOverrides:
    def test_env_overrides_bool(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PICKLIST_TRANSIENT", "true")
        config = Config.load(tmp_path)
        assert config.transient is True

    def test_env_overrides_string(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PICKLIST_SELECTED_STYLE", "black on green")
        config = Config.load(tmp_path)
        assert config.selected_style == "black on green"

    def test_every_setting_has_an_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        for key in Config.DEFAULTS:
            monkeypatch.setenv(f"PICKLIST_{key.upper()}", "1")
        config = Config.load(tmp_path)
        assert config.transient is True
        assert config.log_level == "1"
        assert config.log_file == "1"
