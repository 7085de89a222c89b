import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Define the config path in the user's home directory (~/.langtag/config.json)
CONFIG_DIR = Path.home() / ".langtag"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    "tagging": {
        "fallback_tag": "und",
        "keep_unknown": False,
    },
    "detection": {
        "sample_chars": 1000,
    },
}

def load_config() -> dict:
    """Loads the config file. Creates it with defaults if it doesn't exist."""
    if not CONFIG_FILE.exists():
        _create_default_config()
        return _merge_configs(DEFAULT_CONFIG, {})

    try:
        with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
            user_config = json.load(f)

        merged_config = _merge_configs(DEFAULT_CONFIG, user_config)

        # Persist keys added by newer versions
        if merged_config != user_config:
            save_config(merged_config)

        return merged_config

    except json.JSONDecodeError:
        logger.warning("Config file %s is corrupted, using defaults", CONFIG_FILE)
        return _merge_configs(DEFAULT_CONFIG, {})

def save_config(config_data: dict):
    """Saves the configuration dictionary to the JSON file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, 'w', encoding='utf-8') as f:
        json.dump(config_data, f, indent=4)

def _create_default_config():
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    save_config(DEFAULT_CONFIG)

def _merge_configs(default: dict, user: dict) -> dict:
    """Recursively merges user config with defaults to ensure missing keys are added."""
    merged = {k: (v.copy() if isinstance(v, dict) else v) for k, v in default.items()}
    for key, value in user.items():
        if isinstance(merged.get(key), dict):
            # A section replaced by a scalar keeps its defaults
            if isinstance(value, dict):
                merged[key] = _merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged
