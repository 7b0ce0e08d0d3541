"""Command: check graph invariants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from frozengraph.commands._base import GraphCommand
from frozengraph.domain.graph import create_graph, get_adjacency, get_vertex_data
from frozengraph.domain.samples import SAMPLE_BUILDERS
from frozengraph.services.graph import GraphService

if TYPE_CHECKING:
    from frozengraph.commands._context import AppContext


@click.command(
    cls=GraphCommand,
    examples="""\
  frozengraph check
  frozengraph check --raw-edge TAS NZ
  frozengraph --json check --build literal""",
)
@click.option(
    "--build",
    type=click.Choice(sorted(SAMPLE_BUILDERS)),
    default="literal",
    show_default=True,
    help="Which sample construction to check.",
)
@click.option(
    "--raw-edge",
    "raw_edges",
    nargs=2,
    multiple=True,
    metavar="ID1 ID2",
    help="Write ID1 -> ID2 straight into the adjacency map, unvalidated (repeatable).",
)
@click.pass_obj
def check(app: AppContext, build: str, raw_edges: tuple[tuple[str, str], ...]) -> None:
    """Verify key parity and that no edge points to a missing vertex."""
    graph = SAMPLE_BUILDERS[build]()
    if raw_edges:
        adjacency = get_adjacency(graph)
        for id1, id2 in raw_edges:
            adjacency.setdefault(id1, []).append(id2)
        graph = create_graph(adjacency, get_vertex_data(graph))
    app.emit(GraphService(graph).check())
