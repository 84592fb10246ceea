# The MIT License (MIT)
# Copyright © 2025 Entrius

"""CLI configuration stored in ~/.ghclient/config.json."""

import json
import os
from typing import Any, Dict

import bittensor as bt

from ghclient.constants import CONFIG_FILE, GHCLIENT_DIR, GITHUB_TOKEN_ENV


def load_config() -> Dict[str, Any]:
    """
    Load configuration from ~/.ghclient/config.json.

    Config file format:
        {
            "token": "ghp_xxx",
            "owner": "my-org"
        }

    Manage via: ghc config set <key> <value>

    Returns:
        Dict with all config keys, empty if the file is missing or unreadable
    """
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            bt.logging.warning(f"Ignoring unreadable config file {CONFIG_FILE}: {e}")
            return {}
        if isinstance(config, dict):
            return config
    return {}


def save_config_value(key: str, value: str) -> Any:
    """Set one config key, returning the previous value (or None)."""
    GHCLIENT_DIR.mkdir(parents=True, exist_ok=True)

    config = load_config()
    old_value = config.get(key)
    config[key] = value

    CONFIG_FILE.write_text(json.dumps(config, indent=2))
    return old_value


def resolve_token(cli_value: str = '') -> str:
    """
    Get the GitHub token. CLI arg > GITHUB_TOKEN env var > config file.

    Args:
        cli_value: Value passed via --token CLI option

    Returns:
        Token string, empty if none is configured
    """
    if cli_value:
        return cli_value

    env_value = os.environ.get(GITHUB_TOKEN_ENV, '')
    if env_value:
        return env_value

    return str(load_config().get('token', '') or '')
