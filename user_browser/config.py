"""
Configuration settings for the user browser
"""

import copy
import os
import json
from typing import Dict, Any

from simple_logger import LogLevel
from user_browser.errors import ConfigError


DEFAULT_CONFIG = {
    "service": {
        "base_url": "https://jsonplaceholder.typicode.com/",
        "resource": "users",
        "timeout": 30,
        "impersonate": None
    },
    "ui": {
        "per_page": 3,
        "fetch_delay": 1.0,
        "title": "Service Client",
        "sub_title": "Users from a remote service"
    },
    "logging": {
        "path": "logs/user_browser.log",
        "level": "INFO"
    }
}

CONFIG_FILE = os.path.expanduser("~/.user_browser_config.json")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `override` into `base` one section deep."""
    for key, value in override.items():
        if isinstance(base.get(key), dict) and not isinstance(value, dict):
            raise ConfigError(f"Config section '{key}' must be an object, got {type(value).__name__}")
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key].update(value)
        else:
            base[key] = value
    return base


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Check for config file
    if os.path.exists(config_file):
        try:
            with open(config_file, 'r') as f:
                file_config = json.load(f)
                if not isinstance(file_config, dict):
                    raise ConfigError(
                        f"Config file {config_file} must hold a JSON object, got {type(file_config).__name__}"
                    )
                _merge(config, file_config)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Error loading config file: {e}")

    # Override with environment variables
    if os.environ.get("USER_BROWSER_BASE_URL"):
        config["service"]["base_url"] = os.environ.get("USER_BROWSER_BASE_URL")

    if os.environ.get("USER_BROWSER_PER_PAGE"):
        config["ui"]["per_page"] = _as_number(
            "USER_BROWSER_PER_PAGE", os.environ["USER_BROWSER_PER_PAGE"], int
        )

    if os.environ.get("USER_BROWSER_FETCH_DELAY"):
        config["ui"]["fetch_delay"] = _as_number(
            "USER_BROWSER_FETCH_DELAY", os.environ["USER_BROWSER_FETCH_DELAY"], float
        )

    if os.environ.get("USER_BROWSER_LOG_PATH"):
        config["logging"]["path"] = os.environ.get("USER_BROWSER_LOG_PATH")

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Raise ConfigError for values the app cannot run with."""
    for section in ("service", "ui", "logging"):
        if not isinstance(config.get(section, {}), dict):
            raise ConfigError(f"Config section '{section}' must be an object")

    per_page = config.get("ui", {}).get("per_page")
    if not isinstance(per_page, int) or isinstance(per_page, bool) or per_page <= 0:
        raise ConfigError(f"ui.per_page must be a positive integer, got {per_page!r}")

    fetch_delay = config.get("ui", {}).get("fetch_delay", 0)
    if not isinstance(fetch_delay, (int, float)) or fetch_delay < 0:
        raise ConfigError(f"ui.fetch_delay must be a non-negative number, got {fetch_delay!r}")

    if not config.get("service", {}).get("base_url"):
        raise ConfigError("service.base_url must be set")

    level = config.get("logging", {}).get("level")
    if level is not None and (
        not isinstance(level, str) or level.upper() not in LogLevel.__members__
    ):
        raise ConfigError(
            f"logging.level must be one of {', '.join(LogLevel.__members__)}, got {level!r}"
        )


def save_config(config: Dict[str, Any], config_file: str = CONFIG_FILE) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(config_file, 'w') as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        print(f"Error saving config file: {e}")
        return False


def _as_number(name: str, raw: str, kind):
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
