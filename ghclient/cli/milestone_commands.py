# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Milestone commands.

Commands:
    ghc milestones list OWNER REPO [--state open|closed|all]
    ghc milestones get OWNER REPO NUMBER
    ghc milestones create OWNER REPO TITLE
    ghc milestones update OWNER REPO NUMBER
    ghc milestones open OWNER REPO NUMBER
    ghc milestones close OWNER REPO TITLE
    ghc milestones delete OWNER REPO (--number N | --title T)
"""

from typing import Optional

import click

from ghclient.classes import MilestonePatch, MilestoneProperties
from ghclient.constants import MILESTONE_STATE_FILTERS

from .helpers import (
    api_errors,
    build_client,
    colorize_state,
    console,
    milestones_table,
    parse_state,
    print_json,
    print_success,
)

STATE_CHOICE = click.Choice(['open', 'closed'])


@click.group(name='milestones')
def milestones():
    """Milestone management commands.

    \b
    Commands:
        list       List milestones of a repository
        get        Show one milestone by number
        create     Create a milestone
        update     Patch title, state, description or due date
        open       Reopen a milestone by number
        close      Close a milestone by title
        delete     Delete a milestone by number or title
    """
    pass


@milestones.command('list')
@click.argument('owner')
@click.argument('repo')
@click.option('--state', type=click.Choice(list(MILESTONE_STATE_FILTERS)), default=None, help='Filter by state')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def milestones_list(ctx: click.Context, owner: str, repo: str, state: Optional[str], as_json: bool):
    """List milestones of OWNER/REPO.

    \b
    Example:
        ghc milestones list octocat hello-world --state all
    """
    with build_client(ctx) as gh, api_errors():
        items = gh.list_milestones(owner, repo, state=state)

    if as_json:
        print_json([m.to_dict() for m in items])
        return

    if not items:
        console.print(f'[yellow]No milestones found in {owner}/{repo}.[/yellow]')
        return

    console.print(milestones_table(items))


@milestones.command('get')
@click.argument('owner')
@click.argument('repo')
@click.argument('number', type=int)
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def milestones_get(ctx: click.Context, owner: str, repo: str, number: int, as_json: bool):
    """Show milestone NUMBER of OWNER/REPO."""
    with build_client(ctx) as gh, api_errors():
        milestone = gh.get_milestone(owner, repo, number)

    if as_json:
        print_json(milestone.to_dict())
        return

    console.print(milestones_table([milestone]))
    console.print(f'[dim]{milestone.url}[/dim]')


@milestones.command('create')
@click.argument('owner')
@click.argument('repo')
@click.argument('title')
@click.option('--state', type=STATE_CHOICE, default=None, help='Initial state (server default: open)')
@click.option('--description', default=None, help='Milestone description')
@click.option('--due-on', default=None, help='Due date as an ISO 8601 timestamp')
@click.pass_context
def milestones_create(
    ctx: click.Context,
    owner: str,
    repo: str,
    title: str,
    state: Optional[str],
    description: Optional[str],
    due_on: Optional[str],
):
    """Create a milestone titled TITLE in OWNER/REPO."""
    props = MilestoneProperties(title=title, state=parse_state(state), description=description, due_on=due_on)

    with build_client(ctx) as gh, api_errors():
        milestone = gh.create_milestone(owner, repo, props)

    print_success(f'Created milestone #{milestone.number} "{milestone.title}" ({colorize_state(milestone.state)})')


@milestones.command('update')
@click.argument('owner')
@click.argument('repo')
@click.argument('number', type=int)
@click.option('--title', default=None, help='New title')
@click.option('--state', type=STATE_CHOICE, default=None, help='New state')
@click.option('--description', default=None, help='New description')
@click.option('--due-on', default=None, help='New due date as an ISO 8601 timestamp')
@click.pass_context
def milestones_update(
    ctx: click.Context,
    owner: str,
    repo: str,
    number: int,
    title: Optional[str],
    state: Optional[str],
    description: Optional[str],
    due_on: Optional[str],
):
    """Patch milestone NUMBER. Only the given fields are changed."""
    patch = MilestonePatch(title=title, state=parse_state(state), description=description, due_on=due_on)
    if not patch.to_payload():
        raise click.UsageError('Nothing to update: pass at least one of --title, --state, --description, --due-on.')

    with build_client(ctx) as gh, api_errors():
        milestone = gh.update_milestone(owner, repo, number, patch)

    print_success(f'Updated milestone #{milestone.number} "{milestone.title}"')


@milestones.command('open')
@click.argument('owner')
@click.argument('repo')
@click.argument('number', type=int)
@click.pass_context
def milestones_open(ctx: click.Context, owner: str, repo: str, number: int):
    """Reopen milestone NUMBER."""
    with build_client(ctx) as gh, api_errors():
        milestone = gh.open_milestone(owner, repo, number)

    print_success(f'Milestone #{milestone.number} "{milestone.title}" is {colorize_state(milestone.state)}')


@milestones.command('close')
@click.argument('owner')
@click.argument('repo')
@click.argument('title')
@click.pass_context
def milestones_close(ctx: click.Context, owner: str, repo: str, title: str):
    """Close the milestone titled TITLE."""
    with build_client(ctx) as gh, api_errors():
        milestone = gh.close_milestone(owner, repo, title)

    print_success(f'Milestone #{milestone.number} "{milestone.title}" is {colorize_state(milestone.state)}')


@milestones.command('delete')
@click.argument('owner')
@click.argument('repo')
@click.option('--number', type=int, default=None, help='Milestone number')
@click.option('--title', default=None, help='Milestone title (exact match)')
@click.pass_context
def milestones_delete(ctx: click.Context, owner: str, repo: str, number: Optional[int], title: Optional[str]):
    """Delete a milestone by --number or --title.

    \b
    Examples:
        ghc milestones delete octocat hello-world --number 3
        ghc ms delete octocat hello-world --title "v1.0"
    """
    if (number is None) == (title is None):
        raise click.UsageError('Pass exactly one of --number or --title.')

    with build_client(ctx) as gh, api_errors():
        if number is not None:
            gh.delete_milestone(owner, repo, number)
        else:
            gh.delete_milestone_with_title(owner, repo, title)

    target = f'#{number}' if number is not None else f'"{title}"'
    print_success(f'Deleted milestone {target} from {owner}/{repo}')
