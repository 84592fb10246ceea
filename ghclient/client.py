# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Typed client for the GitHub user, organization repository and milestone endpoints.

Primitive operations issue exactly one request. Derived operations (title lookup,
open/close, delete by title) run their requests in order and stop at the first
failure, re-raising it unchanged.
"""

import json
from typing import Any, Callable, Dict, List, Optional, TypeVar

import bittensor as bt
import requests

from ghclient.classes import Milestone, MilestonePatch, MilestoneProperties, Repo, State, User
from ghclient.constants import BASE_GITHUB_API_URL, MILESTONE_STATE_FILTERS, TITLE_LOOKUP_STATE_FILTER
from ghclient.errors import HTTPError, NotFound, SerializationError
from ghclient.utils.transport import RequestPresets, Transport

T = TypeVar('T')


class Client:
    """GitHub API client bound to a single personal access token.

    Args:
        token (str): GitHub PAT, sent as ``Authorization: token <PAT>``
        base_url (str): API root, without a trailing slash
        session (Optional[requests.Session]): Session to reuse for connection pooling; it may be
            shared between clients and is not closed by ``close()``
    """

    def __init__(
        self,
        token: str,
        base_url: str = BASE_GITHUB_API_URL,
        session: Optional[requests.Session] = None,
    ):
        self._transport = Transport(RequestPresets(token), session=session)
        self._base_url = base_url.rstrip('/')

    def __enter__(self) -> 'Client':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    # =========================================================================
    # Users & repositories
    # =========================================================================

    def current_user(self) -> User:
        """Get the user the token belongs to."""
        return self._get('user', decode=User.from_github_response)

    def list_repos_of_org(self, org: str) -> List[Repo]:
        """List repositories of an organization (first page only)."""
        return self._get('orgs', org, 'repos', decode=_list_of(Repo.from_github_response))

    # =========================================================================
    # Milestones
    # =========================================================================

    def list_milestones(self, owner: str, repo: str, state: Optional[str] = None) -> List[Milestone]:
        """List milestones of a repository.

        Args:
            owner (str): Repository owner (user or organization)
            repo (str): Repository name
            state (Optional[str]): 'open', 'closed' or 'all'; None leaves the server default (open)

        Returns:
            List[Milestone]: Milestones from the first page of results
        """
        params = None
        if state is not None:
            if state not in MILESTONE_STATE_FILTERS:
                raise ValueError(f"state must be one of {MILESTONE_STATE_FILTERS}, got {state!r}")
            params = {'state': state}

        return self._get(
            'repos', owner, repo, 'milestones',
            params=params,
            decode=_list_of(Milestone.from_github_response),
        )

    def get_milestone(self, owner: str, repo: str, number: int) -> Milestone:
        return self._get('repos', owner, repo, 'milestones', number, decode=Milestone.from_github_response)

    def create_milestone(self, owner: str, repo: str, props: MilestoneProperties) -> Milestone:
        url = self._url('repos', owner, repo, 'milestones')
        body = _encode(props.to_payload())
        response = self._call(self._transport.post, url, body)
        return _decode(response, Milestone.from_github_response)

    def update_milestone(self, owner: str, repo: str, number: int, patch: MilestonePatch) -> Milestone:
        """Apply a partial update. Only fields set on ``patch`` are sent."""
        url = self._url('repos', owner, repo, 'milestones', number)
        body = _encode(patch.to_payload())
        response = self._call(self._transport.patch, url, body)
        return _decode(response, Milestone.from_github_response)

    def delete_milestone(self, owner: str, repo: str, number: int) -> None:
        url = self._url('repos', owner, repo, 'milestones', number)
        self._call(self._transport.delete, url)

    # =========================================================================
    # Derived milestone operations
    # =========================================================================

    def get_milestone_with_title(self, owner: str, repo: str, title: str) -> Milestone:
        """Find a milestone by exact, case-sensitive title.

        Open and closed milestones are both searched; the first match in listing
        order wins when titles are duplicated.

        Raises:
            NotFound: No milestone in the listing has this title
        """
        milestones = self.list_milestones(owner, repo, state=TITLE_LOOKUP_STATE_FILTER)

        for milestone in milestones:
            if milestone.title == title:
                bt.logging.debug(f"Milestone '{title}' in {owner}/{repo} is #{milestone.number}")
                return milestone

        bt.logging.debug(f"No milestone titled '{title}' among {len(milestones)} in {owner}/{repo}")
        raise NotFound(title, owner, repo)

    def open_milestone(self, owner: str, repo: str, number: int) -> Milestone:
        return self._update_milestone_state(owner, repo, number, State.OPEN)

    def open_milestone_with_title(self, owner: str, repo: str, title: str) -> Milestone:
        milestone = self.get_milestone_with_title(owner, repo, title)
        return self._update_milestone_state(owner, repo, milestone.number, State.OPEN)

    def close_milestone(self, owner: str, repo: str, title: str) -> Milestone:
        """Close the milestone with the given title. No update is sent if the lookup fails."""
        milestone = self.get_milestone_with_title(owner, repo, title)
        return self._update_milestone_state(owner, repo, milestone.number, State.CLOSED)

    def delete_milestone_with_title(self, owner: str, repo: str, title: str) -> None:
        milestone = self.get_milestone_with_title(owner, repo, title)
        self.delete_milestone(owner, repo, milestone.number)

    def _update_milestone_state(self, owner: str, repo: str, number: int, state: State) -> Milestone:
        # title, description and due_on stay absent so the server keeps them
        return self.update_milestone(owner, repo, number, MilestonePatch.state_only(state))

    # =========================================================================
    # Implementation
    # =========================================================================

    def _url(self, *segments: Any) -> str:
        return '/'.join([self._base_url] + [str(segment) for segment in segments])

    def _get(
        self,
        *segments: Any,
        decode: Callable[[Any], T],
        params: Optional[Dict[str, str]] = None,
    ) -> T:
        response = self._call(self._transport.get, self._url(*segments), params)
        return _decode(response, decode)

    @staticmethod
    def _call(send: Callable[..., requests.Response], url: str, *args: Any) -> requests.Response:
        """Issue one request, mapping transport failures and non-2xx statuses to HTTPError."""
        try:
            response = send(url, *args)
        except requests.RequestException as e:
            raise HTTPError(f"Request to {url} failed: {e}", cause=e, url=url) from e

        if not 200 <= response.status_code < 300:
            bt.logging.warning(f"GitHub request to {url} failed with status {response.status_code}")
            message = f"GitHub responded {response.status_code} for {url}"
            raise HTTPError(
                message,
                cause=requests.HTTPError(message, response=response),
                status_code=response.status_code,
                url=url,
            )

        return response


def client(token: str) -> Client:
    """Build a Client for the public GitHub API."""
    return Client(token)


def _list_of(decode: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    def decode_list(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise SerializationError(f"Expected a JSON array, got {type(data).__name__}")
        return [decode(item) for item in data]

    return decode_list


def _encode(payload: Dict[str, Any]) -> str:
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode request body: {e}", cause=e) from e


def _decode(response: requests.Response, decode: Callable[[Any], T]) -> T:
    try:
        data = response.json()
    except ValueError as e:
        raise SerializationError(f"Response from {response.url} is not valid JSON: {e}", cause=e) from e
    return decode(data)
