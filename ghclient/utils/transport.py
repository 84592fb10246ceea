# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
HTTP transport for the GitHub REST API.

Every request carries the same two headers, fixed when the transport is built:
``Authorization: token <PAT>`` and the client's ``User-Agent``. Transport errors
(``requests.RequestException``) are not caught here.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import bittensor as bt
import requests

from ghclient.constants import JSON_CONTENT_TYPE, USER_AGENT
from ghclient.utils.utils import mask_secret


@dataclass(frozen=True)
class RequestPresets:
    """Immutable per-client request settings."""

    token: str
    user_agent: str = USER_AGENT

    def __post_init__(self):
        if not self.token:
            raise ValueError("A GitHub token is required")

    @property
    def headers(self) -> Dict[str, str]:
        """Build the headers injected into every request.

        Returns:
            Dict[str, str]: Mapping of HTTP header names to values.
        """
        return {
            "Authorization": f"token {self.token}",
            # Per https://docs.github.com/rest/overview/resources-in-the-rest-api#user-agent-required
            "User-Agent": self.user_agent,
        }

    def __repr__(self) -> str:
        return f"RequestPresets(token={mask_secret(self.token)}, user_agent={self.user_agent!r})"


class Transport:
    """Verb-based wrapper around a ``requests.Session``.

    The preset headers are sent per request and never written into the session,
    so several transports can share one session. A session passed in by the
    caller is left open by ``close()``.
    """

    def __init__(self, presets: RequestPresets, session: Optional[requests.Session] = None):
        self.presets = presets
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def get(self, url: str, params: Optional[Dict[str, str]] = None) -> requests.Response:
        return self._send("GET", url, params=params)

    def post(self, url: str, body: str) -> requests.Response:
        return self._send("POST", url, body=body)

    def patch(self, url: str, body: str) -> requests.Response:
        return self._send("PATCH", url, body=body)

    def delete(self, url: str) -> requests.Response:
        return self._send("DELETE", url)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _send(
        self,
        method: str,
        url: str,
        body: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        # requests merges these over the session defaults (Accept, Accept-Encoding, ...)
        headers = dict(self.presets.headers)
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        bt.logging.debug(f"GitHub {method} {url}")

        try:
            return self.session.request(method, url, params=params, data=body, headers=headers)
        except requests.RequestException as e:
            bt.logging.error(f"GitHub {method} {url} failed: {e}")
            raise
