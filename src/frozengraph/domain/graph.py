"""Immutable adjacency-list graph.

A :class:`Graph` pairs two maps keyed by vertex id:

- ``adjacency``: vertex id -> ordered list of neighbor ids
  (edge insertion order, never a duplicate neighbor).
- ``vertices``: vertex id -> opaque payload supplied by the caller.

e.g. ``1 -> 2 <-> 3``::

    adjacency = {"1": ["2"], "2": ["3"], "3": ["2"]}
    vertices = {"1": {...}, "2": {...}, "3": {...}}

INVARIANT: Graphs are never modified after construction. Every insertion
returns a new, fully independent Graph; the input is left untouched.

INVARIANT: For any graph produced by the public operations the key sets
of both maps are equal and every neighbor id is itself a vertex.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

type VertexId = str


@dataclass(frozen=True)
class Vertex[D]:
    """A vertex viewed as a record: its id and its payload."""

    id: VertexId
    data: D


@dataclass(frozen=True)
class ValidationResult:
    """Result of a graph invariant check."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True, init=False)
class Graph[D]:
    """Immutable graph value.

    Construct through :func:`create_graph`. Both maps are deep-copied on the
    way in and on the way out, so nothing outside the graph aliases its state.
    """

    _adjacency: dict[VertexId, list[VertexId]]
    _vertices: dict[VertexId, D]

    def __init__(
        self,
        adjacency: Mapping[VertexId, Sequence[VertexId]],
        vertices: Mapping[VertexId, D],
    ) -> None:
        object.__setattr__(
            self,
            "_adjacency",
            {vid: list(neighbors) for vid, neighbors in adjacency.items()},
        )
        object.__setattr__(self, "_vertices", copy.deepcopy(dict(vertices)))

    # Graphs compare by value, so they cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    @property
    def adjacency(self) -> dict[VertexId, list[VertexId]]:
        """Deep copy of the adjacency map."""
        return get_adjacency(self)

    @property
    def vertices(self) -> dict[VertexId, D]:
        """Deep copy of the vertex-data map."""
        return get_vertex_data(self)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return isinstance(vertex_id, str) and vertex_exists(self, vertex_id)

    def __repr__(self) -> str:
        return f"Graph(adjacency={self._adjacency!r}, vertices={self._vertices!r})"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def create_graph[D](
    adjacency: Mapping[VertexId, Sequence[VertexId]] | None = None,
    vertices: Mapping[VertexId, D] | None = None,
) -> Graph[D]:
    """Create a graph from an adjacency map and/or a vertex-data map.

    - Both given: used as-is. Mutual consistency is the caller's job;
      see :func:`check_invariants`.
    - Only *vertices*: every vertex gets an empty neighbor list.
    - Only *adjacency*: every vertex gets an empty ``{}`` payload.
    - Neither: the empty graph.
    """
    if adjacency is not None and vertices is not None:
        return Graph(adjacency, vertices)
    if vertices is not None:
        return Graph({vid: [] for vid in vertices}, vertices)
    if adjacency is not None:
        return Graph(adjacency, {vid: {} for vid in adjacency})
    return Graph({}, {})


# ---------------------------------------------------------------------------
# Read accessors
# ---------------------------------------------------------------------------


def get_adjacency(graph: Graph[Any]) -> dict[VertexId, list[VertexId]]:
    """Return an independent copy of the adjacency map."""
    return {vid: list(neighbors) for vid, neighbors in graph._adjacency.items()}


def get_vertex_data[D](graph: Graph[D]) -> dict[VertexId, D]:
    """Return an independent deep copy of the vertex-data map."""
    return copy.deepcopy(graph._vertices)


def get_ids(graph: Graph[Any]) -> list[VertexId]:
    """Return all vertex ids in insertion order.

    Read from the vertex-data map: in a directed graph a vertex with no
    outgoing edges still exists.
    """
    return list(graph._vertices)


def vertex_exists(graph: Graph[Any], vertex_id: VertexId) -> bool:
    """True iff *vertex_id* is a key of both maps."""
    return vertex_id in graph._adjacency and vertex_id in graph._vertices


def get_vertex[D](graph: Graph[D], vertex_id: VertexId) -> Vertex[D] | None:
    if not vertex_exists(graph, vertex_id):
        return None
    return Vertex(vertex_id, copy.deepcopy(graph._vertices[vertex_id]))


def iter_vertices[D](graph: Graph[D]) -> list[Vertex[D]]:
    """Return every vertex as a :class:`Vertex` record, in insertion order."""
    return [Vertex(vid, data) for vid, data in get_vertex_data(graph).items()]


def get_neighbors(graph: Graph[Any], vertex_id: VertexId) -> list[VertexId]:
    """Return a copy of *vertex_id*'s neighbor list (empty if unknown)."""
    return list(graph._adjacency.get(vertex_id, ()))


def edge_exists(graph: Graph[Any], id1: VertexId, id2: VertexId) -> bool:
    """True iff the directed entry ``id1 -> id2`` is present."""
    return id2 in graph._adjacency.get(id1, ())


def missing_vertices(graph: Graph[Any], *vertex_ids: VertexId) -> tuple[VertexId, ...]:
    """Return the ids among *vertex_ids* that are not vertices of *graph*."""
    missing: list[VertexId] = []
    for vid in vertex_ids:
        if not vertex_exists(graph, vid) and vid not in missing:
            missing.append(vid)
    return tuple(missing)


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def add_vertex[D](graph: Graph[D], vertex_id: VertexId, data: D) -> Graph[D]:
    """Insert or overwrite *vertex_id*, returning a new graph.

    The vertex gets an empty neighbor list and payload *data*; last write
    wins. Edges from other vertices to *vertex_id* are kept.
    """
    adjacency = get_adjacency(graph)
    adjacency[vertex_id] = []
    vertices = dict(graph._vertices)
    vertices[vertex_id] = data
    return Graph(adjacency, vertices)


def _add_edge[D](graph: Graph[D], id1: VertexId, id2: VertexId, *, directed: bool) -> Graph[D]:
    if not vertex_exists(graph, id1) or not vertex_exists(graph, id2):
        return graph

    adjacency = get_adjacency(graph)
    if id2 not in adjacency[id1]:
        adjacency[id1].append(id2)
    if not directed and id1 not in adjacency[id2]:
        adjacency[id2].append(id1)
    return Graph(adjacency, graph._vertices)


def add_edge[D](graph: Graph[D], id1: VertexId, id2: VertexId) -> Graph[D]:
    """Connect *id1* and *id2* in both directions, returning a new graph.

    Returns *graph* itself when either vertex does not exist. Entries that
    are already present are not duplicated; a self loop is recorded once.
    """
    return _add_edge(graph, id1, id2, directed=False)


def add_directed_edge[D](graph: Graph[D], id1: VertexId, id2: VertexId) -> Graph[D]:
    """Connect *id1* to *id2* only, returning a new graph.

    Returns *graph* itself when either vertex does not exist.
    """
    return _add_edge(graph, id1, id2, directed=True)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def check_invariants(graph: Graph[Any]) -> ValidationResult:
    """Check key parity, dangling neighbors and duplicate neighbor entries.

    Only graphs built with the two-argument :func:`create_graph` form can
    fail; every insertion operation preserves the invariants.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for vid in graph._adjacency:
        if vid not in graph._vertices:
            errors.append(f"Vertex '{vid}' has an adjacency entry but no data")
    for vid in graph._vertices:
        if vid not in graph._adjacency:
            errors.append(f"Vertex '{vid}' has data but no adjacency entry")

    for vid, neighbors in graph._adjacency.items():
        seen: set[VertexId] = set()
        for neighbor in neighbors:
            if neighbor not in graph._vertices:
                errors.append(f"Edge '{vid}' -> '{neighbor}' points to a missing vertex")
            if neighbor in seen:
                warnings.append(f"Edge '{vid}' -> '{neighbor}' is listed more than once")
            seen.add(neighbor)

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)
