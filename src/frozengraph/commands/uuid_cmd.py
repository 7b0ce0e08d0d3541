"""Command: mint vertex IDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from frozengraph.commands._base import GraphCommand
from frozengraph.services.ids import mint_ids

if TYPE_CHECKING:
    from frozengraph.commands._context import AppContext


@click.command(
    "uuid",
    cls=GraphCommand,
    examples="""\
  frozengraph uuid
  frozengraph -q uuid --count 5""",
)
@click.option("-n", "--count", default=1, show_default=True, type=int, help="How many IDs.")
@click.pass_obj
def uuid_cmd(app: AppContext, count: int) -> None:
    """Generate random version 4 UUIDs for use as vertex IDs."""
    app.emit(mint_ids(count))
