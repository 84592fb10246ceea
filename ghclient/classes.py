# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ghclient.errors import SerializationError


class State(Enum):
    """Milestone state as it appears on the wire"""

    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_wire(cls, value: Any) -> 'State':
        """Parse a wire value. Only the exact strings 'open' and 'closed' are accepted."""
        if not isinstance(value, str):
            raise SerializationError(f"Expected 'open' or 'closed', got {value!r}")
        try:
            return cls(value)
        except ValueError as e:
            raise SerializationError(f"Expected 'open' or 'closed', got {value!r}", cause=e) from e

    def __str__(self) -> str:
        return self.value


def _expect_mapping(data: Any, shape: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a JSON object for {shape}, got {type(data).__name__}")
    return data


def _require(data: Dict[str, Any], key: str, expected: type, shape: str) -> Any:
    try:
        value = data[key]
    except KeyError as e:
        raise SerializationError(f"{shape} is missing field '{key}'", cause=e) from e

    # bool is an int subclass, JSON true/false is never a valid id
    if not isinstance(value, expected) or isinstance(value, bool):
        raise SerializationError(
            f"{shape}.{key} should be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _optional_str(data: Dict[str, Any], key: str, shape: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise SerializationError(f"{shape}.{key} should be str or null, got {type(value).__name__}")
    return value


def _state_value(state: Optional[State]) -> Optional[str]:
    if state is None:
        return None
    if not isinstance(state, State):
        raise SerializationError(f"Milestone state must be a State, got {state!r}")
    return state.value


def _drop_absent(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True)
class User:
    """Authenticated GitHub user"""

    id: int
    login: str

    @classmethod
    def from_github_response(cls, data: Any) -> 'User':
        data = _expect_mapping(data, 'User')
        return cls(
            id=_require(data, 'id', int, 'User'),
            login=_require(data, 'login', str, 'User'),
        )


@dataclass(frozen=True)
class Repo:
    """Repository as returned by the org repository listing"""

    id: int
    name: str

    @classmethod
    def from_github_response(cls, data: Any) -> 'Repo':
        data = _expect_mapping(data, 'Repo')
        return cls(
            id=_require(data, 'id', int, 'Repo'),
            name=_require(data, 'name', str, 'Repo'),
        )


@dataclass(frozen=True)
class Milestone:
    """Repository milestone.

    ``number`` is the repository-scoped identifier used in paths; ``id`` is global
    and never used to address a milestone. ``closed_at`` is kept as the raw string.
    """

    id: int
    number: int
    url: str
    title: str
    state: State
    closed_at: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.state is State.OPEN

    @classmethod
    def from_github_response(cls, data: Any) -> 'Milestone':
        data = _expect_mapping(data, 'Milestone')
        return cls(
            id=_require(data, 'id', int, 'Milestone'),
            number=_require(data, 'number', int, 'Milestone'),
            url=_require(data, 'url', str, 'Milestone'),
            title=_require(data, 'title', str, 'Milestone'),
            state=State.from_wire(_require(data, 'state', str, 'Milestone')),
            closed_at=_optional_str(data, 'closed_at', 'Milestone'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'number': self.number,
            'url': self.url,
            'title': self.title,
            'state': self.state.value,
            'closed_at': self.closed_at,
        }


@dataclass(frozen=True)
class MilestoneProperties:
    """Body of a milestone creation request"""

    title: str
    state: Optional[State] = None
    description: Optional[str] = None
    due_on: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Wire payload; unset optional fields are omitted rather than sent as null."""
        return _drop_absent(
            {
                'title': self.title,
                'state': _state_value(self.state),
                'description': self.description,
                'due_on': self.due_on,
            }
        )


@dataclass(frozen=True)
class MilestonePatch:
    """Body of a partial milestone update. The server leaves omitted fields unchanged."""

    title: Optional[str] = None
    state: Optional[State] = None
    description: Optional[str] = None
    due_on: Optional[str] = None

    @classmethod
    def state_only(cls, state: State) -> 'MilestonePatch':
        return cls(state=state)

    def to_payload(self) -> Dict[str, Any]:
        return _drop_absent(
            {
                'title': self.title,
                'state': _state_value(self.state),
                'description': self.description,
                'due_on': self.due_on,
            }
        )
