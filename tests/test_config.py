# =============================================================================
# Tests for configuration loading and saving
# =============================================================================

import pytest

from realm_tui.config import (
    Config,
    ConfigError,
    HostConfig,
    ensure_directories,
    get_xdg_config_home,
    get_xdg_state_home,
)


class TestXdgPaths:
    """Tests for XDG directory resolution."""

    def test_respects_environment(self, monkeypatch, temp_dir):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "config"))
        monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))

        assert get_xdg_config_home() == temp_dir / "config" / "realm-tui"
        assert get_xdg_state_home() == temp_dir / "state" / "realm-tui"
        assert Config.config_file_path() == temp_dir / "config" / "realm-tui" / "config.toml"
        assert Config.default_log_path() == temp_dir / "state" / "realm-tui" / "realm-tui.log"

    def test_ensure_directories(self, monkeypatch, temp_dir):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "config"))
        monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))

        dirs = ensure_directories()

        assert dirs["config"].is_dir()
        assert dirs["state"].is_dir()


class TestConfig:
    """Tests for Config load/save."""

    def test_defaults(self):
        config = Config()

        assert config.host == HostConfig(poll_interval_ms=10, redraw_interval_ms=50)
        assert config.logging.level == "WARNING"
        assert config.ui.margin == 1
        assert config.ui.input_max_length == 0

    def test_missing_file_gives_defaults(self, temp_dir):
        assert Config.load(temp_dir / "missing.toml") == Config()

    def test_round_trip(self, temp_dir):
        config = Config()
        config.host.redraw_interval_ms = 100
        config.logging.level = "DEBUG"
        config.logging.file = str(temp_dir / "app.log")
        config.ui.margin = 0
        config.ui.input_max_length = 32
        path = temp_dir / "nested" / "config.toml"

        config.save(path)

        assert Config.load(path) == config

    def test_partial_file(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[ui]\nmargin = 3\n")

        config = Config.load(path)

        assert config.ui.margin == 3
        assert config.host == HostConfig()

    def test_level_is_normalized(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text('[logging]\nlevel = "info"\n')

        assert Config.load(path).logging.level == "INFO"

    @pytest.mark.parametrize("content", [
        "this is not toml",
        "[host]\npoll_interval_ms = 0\n",
        "[host]\nredraw_interval_ms = \"fast\"\n",
        "[ui]\nmargin = -1\n",
        "[ui]\ninput_max_length = true\n",
        "[logging]\nlevel = \"LOUD\"\n",
    ])
    def test_invalid_file(self, temp_dir, content):
        path = temp_dir / "config.toml"
        path.write_text(content)

        with pytest.raises(ConfigError):
            Config.load(path)

    def test_log_file_path(self, temp_dir):
        config = Config()
        assert config.log_file_path() == Config.default_log_path()

        config.logging.file = str(temp_dir / "custom.log")
        assert config.log_file_path() == temp_dir / "custom.log"
