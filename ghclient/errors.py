# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Error taxonomy raised by the GitHub client."""

from typing import Optional


class GitHubClientError(Exception):
    """Base class for every error the client raises.

    Attributes:
        cause: The underlying exception (transport, JSON or shape error), if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotFound(GitHubClientError):
    """A title lookup found no matching milestone.

    This is a logical condition; a 404 from the server is an HTTPError.
    """

    def __init__(self, title: str, owner: str = '', repo: str = ''):
        location = f" in {owner}/{repo}" if owner and repo else ""
        super().__init__(f"No milestone titled '{title}'{location}")
        self.title = title
        self.owner = owner
        self.repo = repo


class HTTPError(GitHubClientError):
    """Transport failure or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message, cause)
        self.status_code = status_code
        self.url = url


class SerializationError(GitHubClientError):
    """A payload could not be decoded into, or encoded from, the expected shape."""
