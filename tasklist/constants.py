"""
Constants for the tasklist application.

Note: These constants serve as default fallback values.
Actual values are loaded from .tasklist/config.json at runtime via ConfigManager.
"""
import json
import os
from pathlib import Path
from typing import Any, Optional

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

# Storage defaults
DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_SEED_DEFAULTS = True

# Action loop defaults
DEFAULT_DEFERRED_REMOVE = False

# Logging defaults
DEFAULT_LOG_DIR = ".tasklist"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FILE_NAME = "tasklist.log"

# Config location (not configurable through the config file itself)
DEFAULT_CONFIG_DIR = ".tasklist"
CONFIG_FILE_NAME = "config.json"
CONFIG_ENV_VAR = "TASKLIST_CONFIG"

# Messages (not configurable)
NO_TASKS_MESSAGE = "No tasks"
UNDEFINED_ACTION_MESSAGE = "Action undefined: {}"
READ_TASK_ERROR = "Error reading task"
READ_PRIORITY_ERROR = "error reading prompt"
PROMPT_ABORTED = "prompt aborted"

# Display
PRIORITY_WIDTH = 10
TASK_NAME_COLOR = "magenta"


# =============================================================================
# Config Loader
# Load values from .tasklist/config.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


def _default_config_path() -> Path:
    """Config path from the environment, or .tasklist/config.json."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_DIR) / CONFIG_FILE_NAME


class ConfigManager:
    """
    Manages loading configuration from a config.json file with fallback to defaults.

    Usage:
        # With default path (.tasklist/config.json or $TASKLIST_CONFIG)
        config = ConfigManager()
        tasks_file = config.get_str('tasks_file', DEFAULT_TASKS_FILE)

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/config.json"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Direct path to config.json file. Defaults to
                $TASKLIST_CONFIG, then .tasklist/config.json.
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else _default_config_path()

    def _load_config(self) -> dict:
        """Load config from config.json file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
                self._config = loaded if isinstance(loaded, dict) else {}
            except (json.JSONDecodeError, UnicodeDecodeError, IOError):
                self._config = {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_str(self, key: str, default: str) -> str:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean config value with fallback.

        Accepts JSON booleans and the strings "true"/"false"/"yes"/"no"/"1"/"0".
        """
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "yes", "1"):
                return True
            if lowered in ("false", "no", "0"):
                return False
        if isinstance(value, int):
            return bool(value)
        return default

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager() -> ConfigManager:
    """
    Get the singleton ConfigManager instance with default path.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None:
        _config_manager_instance = ConfigManager()
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None


# Convenience functions for common config access
# These use the singleton with default path
def get_tasks_file() -> Path:
    """Get the task file path from config or default."""
    return Path(get_config_manager().get_str('tasks_file', DEFAULT_TASKS_FILE))


def get_seed_defaults() -> bool:
    """Get whether an empty task list is seeded with the default tasks."""
    return get_config_manager().get_bool('seed_defaults', DEFAULT_SEED_DEFAULTS)


def get_deferred_remove() -> bool:
    """Get whether removal is committed on the cycle after selection."""
    return get_config_manager().get_bool('deferred_remove', DEFAULT_DEFERRED_REMOVE)


def get_log_dir() -> Path:
    """Get the log directory from config or default."""
    return Path(get_config_manager().get_str('log_dir', DEFAULT_LOG_DIR))


def get_log_level() -> str:
    """Get the log level name from config or default."""
    return get_config_manager().get_str('log_level', DEFAULT_LOG_LEVEL).upper()
