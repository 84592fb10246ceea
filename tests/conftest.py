#!/usr/bin/env python3
# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for ghclient tests."""

from unittest.mock import Mock, patch

import pytest
import requests

from ghclient.client import Client
from tests.helpers import TOKEN, FakeMilestoneServer


@pytest.fixture(autouse=True)
def mock_logging():
    """Silence bt.logging. Every ghclient module logs through this one object."""
    with patch('bittensor.logging') as logging:
        yield logging


@pytest.fixture
def session():
    """A real Session (so header merging is real) with ``request`` mocked."""
    session = requests.Session()
    session.request = Mock()
    return session


@pytest.fixture
def gh(session):
    return Client(TOKEN, session=session)


@pytest.fixture
def server(session):
    fake = FakeMilestoneServer()
    session.request.side_effect = fake
    return fake
