"""NetworkX view of a Graph value.

Built on demand from a snapshot and never written back. Isolated vertices
are added first so vertices without edges stay visible, then one edge per
adjacency entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from frozengraph.domain.graph import get_adjacency, get_vertex_data

if TYPE_CHECKING:
    from frozengraph.domain.graph import Graph

type DiGraph = nx.DiGraph


def to_digraph(graph: Graph[Any]) -> DiGraph:
    """Build a ``networkx.DiGraph`` from *graph*.

    Each node carries its payload under the ``data`` attribute. An
    undirected edge appears as two directed edges.
    """
    g: DiGraph = nx.DiGraph()
    for vertex_id, data in get_vertex_data(graph).items():
        g.add_node(vertex_id, data=data)
    for vertex_id, neighbors in get_adjacency(graph).items():
        for neighbor in neighbors:
            g.add_edge(vertex_id, neighbor)
    return g


def is_symmetric(g: DiGraph) -> bool:
    """True iff every edge has its reverse, i.e. the graph is undirected."""
    return all(g.has_edge(v, u) for u, v in g.edges)
