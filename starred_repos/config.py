#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

logger = logging.getLogger("starred_repos")

DEFAULT_LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Checked in order when the config has no token
TOKEN_ENV_VARS = ("GITHUB_ACCESS", "GITHUB_TOKEN")


def setup_logging(level="INFO", fmt=DEFAULT_LOG_FORMAT):
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. STARRED_REPOS_CONFIG environment variable
    2. ~/.starred-repos/config.json or config.toml
    """
    if 'STARRED_REPOS_CONFIG' in os.environ:
        path = Path(os.environ['STARRED_REPOS_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.starred-repos'
    for filename in ['config.json', 'config.toml']:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() == '.toml':
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            config = merge_configs(config, file_config)
        except Exception as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    config = restore_invalid_sections(config)
    config = apply_env_overrides(config)

    return config


def get_default_config():
    """Get default configuration."""
    return {
        "github": {
            "token": "",
            "api_url": "https://api.github.com/users/{user}/starred",
            "per_page": 10,
            "user_agent": "starred-repos",
            "timeout_seconds": 30
        },
        "cache": {
            "directory": "cache"
        },
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT
        }
    }


def resolve_token(config):
    """
    Find the GitHub access token.

    The config value wins; otherwise GITHUB_ACCESS, then GITHUB_TOKEN.
    Returns None when no token is available.
    """
    token = config.get("github", {}).get("token")
    if token:
        return token

    for var in TOKEN_ENV_VARS:
        if os.environ.get(var):
            return os.environ[var]

    return None


def restore_invalid_sections(config):
    """
    Replace any top-level section that is not a table with its default.

    Values such as `"github": null` from a config file are logged and dropped.
    """
    for section, default in get_default_config().items():
        if not isinstance(config.get(section), dict):
            logger.warning(f"Ignoring invalid config section '{section}': expected a table")
            config[section] = default

    return config


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
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: STARRED_REPOS_SECTION_KEY
    For example: STARRED_REPOS_GITHUB_PER_PAGE=50
    """
    env_prefix = "STARRED_REPOS_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
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
            # Find the longest key in current_level that is a prefix of the remaining key_parts
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

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict, e.g., env var is longer but we found a non-dict value
                break

    return config
