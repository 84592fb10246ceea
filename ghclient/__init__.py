# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
ghclient - typed client for the GitHub user, org repository and milestone APIs
"""

from ghclient.classes import Milestone, MilestonePatch, MilestoneProperties, Repo, State, User
from ghclient.client import Client
from ghclient.errors import GitHubClientError, HTTPError, NotFound, SerializationError

__version__ = "0.3.0"

__all__ = [
    'Client',
    'GitHubClientError',
    'HTTPError',
    'NotFound',
    'SerializationError',
    'Milestone',
    'MilestonePatch',
    'MilestoneProperties',
    'Repo',
    'State',
    'User',
]
