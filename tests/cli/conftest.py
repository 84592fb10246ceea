# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for CLI tests."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from ghclient.cli.main import cli


@pytest.fixture
def cli_root():
    return cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_client():
    """Patch Client construction inside the CLI and hand back the instance."""
    with patch('ghclient.cli.helpers.Client') as client_cls:
        instance = MagicMock()
        instance.__enter__.return_value = instance
        instance.__exit__.return_value = False
        client_cls.return_value = instance
        instance.client_cls = client_cls
        yield instance


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Isolate config file and GITHUB_TOKEN from the developer's machine."""
    directory = tmp_path / '.ghclient'
    config_file = directory / 'config.json'
    monkeypatch.setattr('ghclient.utils.config.GHCLIENT_DIR', directory)
    monkeypatch.setattr('ghclient.utils.config.CONFIG_FILE', config_file)
    monkeypatch.setattr('ghclient.cli.main.CONFIG_FILE', config_file)
    monkeypatch.delenv('GITHUB_TOKEN', raising=False)
    return config_file
