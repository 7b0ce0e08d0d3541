"""Command: build and print the sample region graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from frozengraph.commands._base import GraphCommand
from frozengraph.domain.samples import SAMPLE_BUILDERS
from frozengraph.services.graph import GraphService

if TYPE_CHECKING:
    from frozengraph.commands._context import AppContext


@click.command(
    cls=GraphCommand,
    examples="""\
  frozengraph demo
  frozengraph demo --build literal
  frozengraph demo --edge TAS VIC
  frozengraph demo --directed-edge TAS VIC --summary
  frozengraph --strict demo --edge TAS NZ
  frozengraph --json demo""",
)
@click.option(
    "--build",
    type=click.Choice(sorted(SAMPLE_BUILDERS)),
    default="imperative",
    show_default=True,
    help="Build from literal maps or by successive insertions.",
)
@click.option(
    "--edge",
    "edges",
    nargs=2,
    multiple=True,
    metavar="ID1 ID2",
    help="Add an undirected edge (repeatable).",
)
@click.option(
    "--directed-edge",
    "directed_edges",
    nargs=2,
    multiple=True,
    metavar="ID1 ID2",
    help="Add a directed edge ID1 -> ID2 (repeatable).",
)
@click.option("--summary", "show_summary", is_flag=True, help="Print counts instead of the graph.")
@click.pass_obj
def demo(
    app: AppContext,
    build: str,
    edges: tuple[tuple[str, str], ...],
    directed_edges: tuple[tuple[str, str], ...],
    show_summary: bool,
) -> None:
    """Build the Australian regions graph and print it."""
    service = GraphService(SAMPLE_BUILDERS[build](), strict=app.settings.strict_edges)

    warnings: list[str] = []
    requested = [(pair, False) for pair in edges] + [(pair, True) for pair in directed_edges]
    for (id1, id2), directed in requested:
        result = service.add_edge(id1, id2, directed=directed)
        if not result.ok:
            app.emit(result)
        warnings.extend(result.warnings)

    final = service.summary() if show_summary else service.show()
    app.emit(final.with_warnings(warnings))
