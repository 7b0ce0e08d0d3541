"""Subcommand modules for frozengraph.

Provides register_commands(), which imports command modules lazily so
``frozengraph --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from frozengraph.commands.check import check
    from frozengraph.commands.demo import demo
    from frozengraph.commands.uuid_cmd import uuid_cmd

    cli.add_command(demo)
    cli.add_command(check)
    cli.add_command(uuid_cmd)
