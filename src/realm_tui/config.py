# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating the host configuration.
#
# The framework itself keeps no state between runs; this file only tunes the
# host loop (how often to poll for input and repaint), logging, and the
# demo UI.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/realm-tui/  (default: ~/.config/realm-tui/)
#   - State:   $XDG_STATE_HOME/realm-tui/   (default: ~/.local/state/realm-tui/)
#
# Files:
#   - config.toml: User configuration
#   - realm-tui.log: Log file (in state directory)
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "realm-tui"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Realm-TUI.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/realm-tui/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Realm-TUI.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/realm-tui/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates all required XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class HostConfig:
    """
    Configuration for the host loop.

    Attributes:
        poll_interval_ms: How often the host checks the input backend.
        redraw_interval_ms: Repaint at least this often even if no message
                            was produced.
    """
    poll_interval_ms: int = 10
    redraw_interval_ms: int = 50


@dataclass
class LoggingConfig:
    """
    Configuration for logging.

    Attributes:
        level: Logging level name ("DEBUG", "INFO", "WARNING", ...).
        file: Log file path. Empty means the default in the state directory.
    """
    level: str = "WARNING"
    file: str = ""


@dataclass
class UIConfig:
    """
    Configuration for the demo user interface.

    Attributes:
        margin: Cells left empty around the layout.
        input_max_length: Maximum characters in the demo input (0 = no limit).
    """
    margin: int = 1
    input_max_length: int = 0


@dataclass
class Config:
    """
    Main configuration container.

    Usage:
        >>> config = Config.load()
        >>> config.host.redraw_interval_ms
        50
    """
    host: HostConfig = field(default_factory=HostConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_log_path() -> Path:
        """Returns the default log file path."""
        return get_xdg_state_home() / f"{APP_NAME}.log"

    def log_file_path(self) -> Path:
        """Returns the configured log file path."""
        if self.logging.file:
            return Path(self.logging.file).expanduser()
        return self.default_log_path()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path if path is not None else cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a config file.

        Creates the config directory if it doesn't exist.

        Args:
            path: Config file to write. Defaults to the XDG location.
        """
        config_path = path if path is not None else self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        config = cls()

        # Host settings
        host = data.get("host", {})
        config.host = HostConfig(
            poll_interval_ms=_positive_int(host, "poll_interval_ms", 10),
            redraw_interval_ms=_positive_int(host, "redraw_interval_ms", 50),
        )

        # Logging settings
        log = data.get("logging", {})
        level = str(log.get("level", "WARNING")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown logging level: {level}")
        config.logging = LoggingConfig(
            level=level,
            file=str(log.get("file", "")),
        )

        # UI settings
        ui = data.get("ui", {})
        config.ui = UIConfig(
            margin=_non_negative_int(ui, "margin", 1),
            input_max_length=_non_negative_int(ui, "input_max_length", 0),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["host"] = {
            "poll_interval_ms": self.host.poll_interval_ms,
            "redraw_interval_ms": self.host.redraw_interval_ms,
        }

        data["logging"] = {
            "level": self.logging.level,
            "file": self.logging.file,
        }

        data["ui"] = {
            "margin": self.ui.margin,
            "input_max_length": self.ui.input_max_length,
        }

        return data


def _non_negative_int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _positive_int(section: dict[str, Any], key: str, default: int) -> int:
    value = _non_negative_int(section, key, default)
    if value == 0:
        raise ConfigError(f"{key} must be greater than zero")
    return value


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.default_log_path()}")
