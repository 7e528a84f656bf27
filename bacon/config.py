#!/usr/bin/env python3

import os
from pathlib import Path
from typing import Optional, Tuple

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("bacon")

CONFIG_ENV = "PNC_CONFIG_PATH"
CONFIG_FILE_NAME = "config.yaml"
ENV_PREFIX = "BACON_"

# Overrides kept verbatim; a token may be all digits
STRING_ENV_KEYS = ("BACON_PNC_URL", "BACON_PNC_TOKEN")

# Set by configure(), read lazily by get_config()
_config_file_path: Optional[Path] = None
_config: Optional[dict] = None


def get_default_config_folder() -> Path:
    """Default configuration folder: ~/.config/pnc-bacon."""
    return Path.home() / '.config' / 'pnc-bacon'


def resolve_config_location(config_path: Optional[str] = None) -> Tuple[str, str]:
    """Pick the configuration folder and report where it came from.

    Checks in order:
    1. the -p/--config-path flag
    2. PNC_CONFIG_PATH environment variable
    3. ~/.config/pnc-bacon

    Returns:
        (folder, source) tuple
    """
    if config_path is not None:
        return config_path, "flag"
    if os.environ.get(CONFIG_ENV) is not None:
        return os.environ[CONFIG_ENV], "environment variable"
    return str(get_default_config_folder()), "Constant"


def configure(config_folder: str, file_name: str = CONFIG_FILE_NAME) -> Path:
    """Point the active configuration at <config_folder>/<file_name>.

    The file itself is read on first use, so a broken file surfaces as a
    command failure rather than at startup.
    """
    global _config_file_path, _config
    _config_file_path = Path(config_folder).expanduser() / file_name
    _config = None
    return _config_file_path


def get_config_file_path() -> Optional[Path]:
    """Path set by the last configure() call, if any."""
    return _config_file_path


def get_config() -> dict:
    """Return the active configuration, loading it on first access."""
    global _config
    if _config is None:
        if _config_file_path is None:
            configure(str(get_default_config_folder()))
        _config = load_config(_config_file_path)
    return _config


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from a YAML file.

    Values from the file are merged over the defaults, then BACON_*
    environment variables are applied on top.
    """
    config = get_default_config()

    if config_path is not None and config_path.exists():
        try:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if file_config is None:
            file_config = {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        config = merge_configs(config, file_config)
    else:
        logger.debug(f"Config file {config_path} not found, using defaults")

    return apply_env_overrides(config)


def get_default_config():
    """Get default configuration."""
    return {
        "pnc": {
            "url": "",
            "token": "",
            "page_size": 50,
            "timeout": 30,
        },
    }


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: BACON_SECTION_KEY
    For example: BACON_PNC_URL=https://pnc.example.com
    """
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue

        key_parts = env_key[len(ENV_PREFIX):].lower().split('_')

        # Convert value
        if env_key in STRING_ENV_KEYS:
            typed_value = value
        elif value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Longest config key that is a prefix of the remaining parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                # Env var is longer than the config path
                break
            current_level = current_level[matched_key]
            i += best_match_len

    return config
