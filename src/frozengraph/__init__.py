"""frozengraph: immutable adjacency-list graphs.

Every insertion returns a new :class:`Graph`; the original is never
modified::

    >>> from frozengraph import add_edge, add_vertex, create_graph, get_adjacency
    >>> g = add_vertex(add_vertex(create_graph(), "A", {}), "B", {})
    >>> get_adjacency(add_edge(g, "A", "B"))
    {'A': ['B'], 'B': ['A']}
"""

from frozengraph.domain.graph import (
    Graph,
    ValidationResult,
    Vertex,
    VertexId,
    add_directed_edge,
    add_edge,
    add_vertex,
    check_invariants,
    create_graph,
    edge_exists,
    get_adjacency,
    get_ids,
    get_neighbors,
    get_vertex,
    get_vertex_data,
    iter_vertices,
    missing_vertices,
    vertex_exists,
)
from frozengraph.domain.ids import generate_uuid, validate_uuid

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "ValidationResult",
    "Vertex",
    "VertexId",
    "add_directed_edge",
    "add_edge",
    "add_vertex",
    "check_invariants",
    "create_graph",
    "edge_exists",
    "generate_uuid",
    "get_adjacency",
    "get_ids",
    "get_neighbors",
    "get_vertex",
    "get_vertex_data",
    "iter_vertices",
    "missing_vertices",
    "validate_uuid",
    "vertex_exists",
]
