#!/usr/bin/env python3
# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Response builders and an in-memory stand-in for the GitHub milestone endpoints.
"""

import json
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import requests

API = 'https://api.github.com'
TOKEN = 'fake_github_token'


def make_response(status_code: int = 200, payload: Any = None, url: str = API) -> Mock:
    """Build a requests.Response look-alike."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.url = url
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    response.text = '' if payload is None or isinstance(payload, Exception) else json.dumps(payload)
    return response


def milestone_json(number: int, title: str, state: str = 'open', closed_at: Optional[str] = None) -> Dict[str, Any]:
    return {
        'id': 1000 + number,
        'number': number,
        'url': f'{API}/repos/octo/hello/milestones/{number}',
        'title': title,
        'state': state,
        'closed_at': closed_at,
        'description': None,
        'open_issues': 0,
    }


class FakeMilestoneServer:
    """Serves /repos/{owner}/{repo}/milestones[/{number}] from a list in memory.

    Listing honours the ``state`` query parameter with GitHub's default of 'open'.
    """

    def __init__(self, owner: str = 'octo', repo: str = 'hello'):
        self.prefix = f'{API}/repos/{owner}/{repo}/milestones'
        self.milestones: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []
        self._next_number = 1

    def add(self, title: str, state: str = 'open') -> Dict[str, Any]:
        milestone = milestone_json(self._next_number, title, state)
        self._next_number += 1
        self.milestones.append(milestone)
        return milestone

    def __call__(self, method, url, params=None, data=None, headers=None):
        self.calls.append((method, url))
        body = json.loads(data) if data else None

        if url == self.prefix:
            if method == 'GET':
                wanted = (params or {}).get('state', 'open')
                items = [m for m in self.milestones if wanted == 'all' or m['state'] == wanted]
                return make_response(200, items, url)
            if method == 'POST':
                milestone = self.add(body['title'], body.get('state', 'open'))
                return make_response(201, milestone, url)

        if url.startswith(self.prefix + '/'):
            number = int(url.rsplit('/', 1)[1])
            milestone = next((m for m in self.milestones if m['number'] == number), None)
            if milestone is None:
                return make_response(404, {'message': 'Not Found'}, url)
            if method == 'GET':
                return make_response(200, milestone, url)
            if method == 'PATCH':
                milestone.update(body)
                milestone['closed_at'] = '2026-01-01T00:00:00Z' if milestone['state'] == 'closed' else None
                return make_response(200, milestone, url)
            if method == 'DELETE':
                self.milestones.remove(milestone)
                return make_response(204, None, url)

        return make_response(404, {'message': 'Not Found'}, url)

    def methods(self) -> List[str]:
        return [method for method, _ in self.calls]

