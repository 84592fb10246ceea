# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared helper functions for CLI commands
"""

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import click
from rich.console import Console
from rich.table import Table

from ghclient.classes import Milestone, State
from ghclient.client import Client
from ghclient.errors import GitHubClientError, HTTPError, NotFound
from ghclient.utils.config import resolve_token

# Status display colors
STATE_COLORS: Dict[str, str] = {
    'open': 'green',
    'closed': 'dim',
}

console = Console()


def colorize_state(state: State) -> str:
    """Wrap state text with the appropriate Rich color tag."""
    color = STATE_COLORS.get(state.value, 'white')
    return f'[{color}]{state.value}[/{color}]'


def print_success(message: str) -> None:
    """Print a standardized success message."""
    console.print(f'\n  [green]✓[/green] {message}\n')


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def parse_state(value: Optional[str]) -> Optional[State]:
    """Convert a validated --state option into a State."""
    if value is None:
        return None
    return State(value)


def build_client(ctx: click.Context) -> Client:
    """Create a Client from the --token option, GITHUB_TOKEN or the config file.

    Raises:
        click.ClickException: If no token is configured.
    """
    token = resolve_token(ctx.obj.get('token', '') if ctx.obj else '')
    if not token:
        raise click.ClickException(
            'GitHub token not configured. Pass --token, set GITHUB_TOKEN, or run: ghc config set token <PAT>.'
        )
    return Client(token)


@contextmanager
def api_errors() -> Iterator[None]:
    """Turn client errors into ClickExceptions with a readable message."""
    try:
        yield
    except NotFound as e:
        raise click.ClickException(str(e)) from e
    except HTTPError as e:
        status = f' (status {e.status_code})' if e.status_code is not None else ''
        raise click.ClickException(f'GitHub request failed{status}: {e}') from e
    except GitHubClientError as e:
        raise click.ClickException(f'Unexpected response from GitHub: {e}') from e


def milestones_table(milestones: List[Milestone]) -> Table:
    table = Table(show_header=True)
    table.add_column('#', style='cyan', justify='right')
    table.add_column('Title', style='bold')
    table.add_column('State')
    table.add_column('Closed At', style='dim')

    for milestone in milestones:
        table.add_row(
            str(milestone.number),
            milestone.title,
            colorize_state(milestone.state),
            milestone.closed_at or '-',
        )
    return table
