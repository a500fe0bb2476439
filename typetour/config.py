#!/usr/bin/env python3
"""
Configuration management for typetour.
User preferences live in a small JSON file under ~/.typetour.
"""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any


CONFIG_DIR_ENV = 'TYPETOUR_HOME'

DEFAULTS: Dict[str, Any] = {
    'clear_screen': True,     # Clear the terminal before each screen
    'show_welcome': True,     # Show the welcome screen on start
    'prompt_history': True,   # Keep prompt history in the config dir
    'log_level': 'INFO',
    'log_file': None,         # None means <config dir>/logs/events.log
}

_TRUE_WORDS = {'1', 'true', 'yes', 'on', 'y'}
_FALSE_WORDS = {'0', 'false', 'no', 'off', 'n'}


def get_config_dir() -> Path:
    """Get the typetour config directory (~/.typetour or $TYPETOUR_HOME)"""
    override = os.environ.get(CONFIG_DIR_ENV)
    config_dir = Path(override).expanduser() if override else Path.home() / '.typetour'
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the config file path"""
    return get_config_dir() / 'config.json'


def load_config() -> Dict[str, Any]:
    """Load configuration from file"""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file"""
    config_path = get_config_path()
    with open(config_path, 'w') as f:
        json.dump(config, f, indent=2)
    # Owner read/write only
    config_path.chmod(0o600)


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Effective settings: defaults, then the config file, then overrides.

    Overrides with a value of None are ignored so unset CLI flags don't
    mask the file.
    """
    settings = dict(DEFAULTS)
    settings.update({k: v for k, v in load_config().items() if k in DEFAULTS})
    if overrides:
        settings.update({k: v for k, v in overrides.items() if v is not None})
    return settings


def get_log_path(settings: Dict[str, Any]) -> Path:
    """Resolve where the event log goes"""
    if settings.get('log_file'):
        return Path(settings['log_file']).expanduser()
    return get_config_dir() / 'logs' / 'events.log'


def parse_config_value(key: str, raw: str) -> Any:
    """
    Convert a string from the command line to the type of the key's default.

    Raises:
        KeyError: unknown key
        ValueError: the string doesn't fit the type
    """
    if key not in DEFAULTS:
        raise KeyError(key)

    default = DEFAULTS[key]
    if isinstance(default, bool):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"Expected true/false for {key}, got '{raw}'")

    if key == 'log_level':
        level = raw.strip().upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level '{raw}'")
        return level

    # log_file: empty string resets to the default location
    return raw or None


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a specific config value"""
    config = load_config()
    return config.get(key, DEFAULTS.get(key, default))


def set_config_value(key: str, value: Any) -> None:
    """Set a specific config value"""
    config = load_config()
    config[key] = value
    save_config(config)
