# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
ghclient CLI - Main entry point

Usage:
    ghc config               - Show/set CLI configuration
    ghc user                 - Show the user the token belongs to
    ghc repos ORG            - List repositories of an organization
    ghc milestones ...       - Milestone management (alias: ms)
"""

import click
from rich.table import Table

from ghclient import __version__
from ghclient.cli.helpers import api_errors, build_client, console, print_json
from ghclient.cli.milestone_commands import milestones
from ghclient.constants import CONFIG_FILE
from ghclient.utils.config import load_config, save_config_value
from ghclient.utils.utils import mask_secret

SECRET_KEYS = {'token'}


class AliasGroup(click.Group):
    """Click Group that supports command aliases without duplicate help entries."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases = {}  # alias -> canonical name

    def add_alias(self, name, alias):
        """Register an alias for an existing command."""
        self._aliases[alias] = name

    def get_command(self, ctx, cmd_name):
        canonical = self._aliases.get(cmd_name, cmd_name)
        return super().get_command(ctx, canonical)

    def format_commands(self, ctx, formatter):
        """Write the help text, appending aliases to command descriptions."""
        alias_map = {}
        for alias, canonical in self._aliases.items():
            alias_map.setdefault(canonical, []).append(alias)

        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.commands.get(subcommand)
            if cmd is None or cmd.hidden:
                continue
            help_text = cmd.get_short_help_str(limit=150)
            aliases = alias_map.get(subcommand)
            if aliases:
                subcommand = f'{subcommand}, {", ".join(sorted(aliases))}'
            commands.append((subcommand, help_text))

        if commands:
            with formatter.section('Commands'):
                formatter.write_dl(commands)


@click.group(cls=AliasGroup)
@click.version_option(version=__version__, prog_name='ghclient')
@click.option('--token', default='', help='GitHub token (default: $GITHUB_TOKEN, then config file)')
@click.pass_context
def cli(ctx: click.Context, token: str):
    """ghclient CLI - GitHub users, org repositories and milestones"""
    ctx.ensure_object(dict)
    ctx.obj['token'] = token


@click.group(name='config', invoke_without_command=True)
@click.pass_context
def config_group(ctx):
    """CLI configuration management.

    Show current configuration (default) or set config values.

    \b
    Subcommands:
        set <key> <value>    Set a config value
    """
    if ctx.invoked_subcommand is None:
        show_config()


def show_config():
    """Show current CLI configuration"""
    console.print('\n[bold]ghclient CLI Configuration[/bold]\n')

    if not CONFIG_FILE.exists():
        console.print(f'[yellow]No config file found at {CONFIG_FILE}[/yellow]')
        console.print('[dim]Run: ghc config set token <PAT>[/dim]')
        return

    config = load_config()
    if not config:
        console.print(f'[yellow]No settings in {CONFIG_FILE} (empty, unreadable or not a JSON object)[/yellow]')
        console.print('[dim]Run: ghc config set token <PAT>[/dim]')
        return

    table = Table(show_header=True)
    table.add_column('Setting', style='cyan')
    table.add_column('Value', style='green')

    for key, value in config.items():
        str_val = mask_secret(value) if key in SECRET_KEYS else str(value)
        if len(str_val) > 25:
            str_val = str_val[:12] + '...' + str_val[-10:]
        table.add_row(key, str_val)

    console.print(table)
    console.print(f'\n[dim]Config file: {CONFIG_FILE}[/dim]\n')


@config_group.command('set')
@click.argument('key', type=str)
@click.argument('value', type=str)
def config_set(key: str, value: str):
    """Set a configuration value.

    \b
    Common keys:
        token               GitHub personal access token

    \b
    Examples:
        ghc config set token ghp_xxx
    """
    old_value = save_config_value(key, value)

    shown = mask_secret(value) if key in SECRET_KEYS else value
    if old_value is not None:
        shown_old = mask_secret(old_value) if key in SECRET_KEYS else old_value
        console.print(f'[green]Updated {key}:[/green] {shown_old} → {shown}')
    else:
        console.print(f'[green]Set {key}:[/green] {shown}')


@click.command('user')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def user(ctx: click.Context, as_json: bool):
    """Show the GitHub user the token belongs to."""
    with build_client(ctx) as gh, api_errors():
        current = gh.current_user()

    if as_json:
        print_json({'id': current.id, 'login': current.login})
        return

    console.print(f'[bold]{current.login}[/bold] [dim](id {current.id})[/dim]')


@click.command('repos')
@click.argument('org')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def repos(ctx: click.Context, org: str, as_json: bool):
    """List repositories of organization ORG (first page)."""
    with build_client(ctx) as gh, api_errors():
        items = gh.list_repos_of_org(org)

    if as_json:
        print_json([{'id': r.id, 'name': r.name} for r in items])
        return

    table = Table(show_header=True, title=f'{org} repositories')
    table.add_column('ID', style='dim', justify='right')
    table.add_column('Name', style='cyan')
    for repo in items:
        table.add_row(str(repo.id), repo.name)
    console.print(table)


cli.add_command(config_group)
cli.add_command(user)
cli.add_command(repos)
cli.add_command(milestones)
cli.add_alias('milestones', 'ms')


def main():
    """Main entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
