"""GraphService: drives a sequence of graph snapshots through ServiceResult.

The domain functions return a new Graph for every insertion; this service
holds the current snapshot and rebinds it to each derived graph, which is
how a caller picks the canonical graph. Published snapshots are never
modified, so a graph read from :attr:`GraphService.graph` stays valid after
later insertions.

Edge insertion between missing vertices keeps the domain's no-op semantics
by default (ok result plus a warning). With ``strict=True`` it fails with
``VERTEX_NOT_FOUND`` instead.
"""

from __future__ import annotations

from typing import Any

import networkx as nx
import structlog
from pydantic import TypeAdapter

from frozengraph.domain.graph import (
    Graph,
    VertexId,
    add_directed_edge,
    add_edge,
    add_vertex,
    check_invariants,
    create_graph,
    edge_exists,
    get_adjacency,
    get_ids,
    get_vertex_data,
    missing_vertices,
    vertex_exists,
)
from frozengraph.infrastructure.graph.engine import is_symmetric, to_digraph
from frozengraph.services.result import ServiceResult

logger = structlog.get_logger(__name__)

_PAYLOAD_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def payload_to_jsonable(data: Any) -> Any:
    """Convert a vertex payload to JSON-compatible values.

    Dataclasses and pydantic models become dicts; anything pydantic cannot
    serialize falls back to its ``repr``.
    """
    return _PAYLOAD_ADAPTER.dump_python(data, mode="json", fallback=repr)


class GraphService:
    """Holds the current graph snapshot and applies insertions to it."""

    def __init__(self, graph: Graph[Any] | None = None, *, strict: bool = False) -> None:
        self._graph: Graph[Any] = graph if graph is not None else create_graph()
        self._strict = strict

    @property
    def graph(self) -> Graph[Any]:
        """The current snapshot."""
        return self._graph

    @property
    def strict(self) -> bool:
        return self._strict

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: VertexId, data: Any) -> ServiceResult:
        """Upsert *vertex_id* with payload *data*."""
        replaced = vertex_exists(self._graph, vertex_id)
        self._graph = add_vertex(self._graph, vertex_id, data)
        logger.debug("graph.add_vertex", vertex_id=vertex_id, replaced=replaced)
        return ServiceResult(
            ok=True,
            op="add_vertex",
            data={
                "id": vertex_id,
                "replaced": replaced,
                "vertex_count": len(self._graph),
            },
        )

    def add_edge(
        self,
        source_id: VertexId,
        target_id: VertexId,
        *,
        directed: bool = False,
    ) -> ServiceResult:
        """Connect *source_id* to *target_id* (both ways unless *directed*).

        Args:
            source_id: The vertex the edge starts from.
            target_id: The vertex the edge points to.
            directed: Only record ``source_id -> target_id``.
        """
        op = "add_directed_edge" if directed else "add_edge"
        edge = {"source_id": source_id, "target_id": target_id}

        missing = missing_vertices(self._graph, source_id, target_id)
        if missing:
            names = ", ".join(f"'{vid}'" for vid in missing)
            logger.debug("graph.edge_skipped", missing=list(missing), strict=self._strict, **edge)
            if self._strict:
                return ServiceResult.failure(
                    op,
                    "VERTEX_NOT_FOUND",
                    f"Vertex not found: {names}",
                    **edge,
                    missing=list(missing),
                )
            return ServiceResult(
                ok=True,
                op=op,
                data={**edge, "added": False},
                warnings=[f"Edge {source_id} -> {target_id} skipped; vertex not found: {names}"],
            )

        already = edge_exists(self._graph, source_id, target_id) and (
            directed or edge_exists(self._graph, target_id, source_id)
        )
        insert = add_directed_edge if directed else add_edge
        self._graph = insert(self._graph, source_id, target_id)
        logger.debug("graph.add_edge", directed=directed, added=not already, **edge)
        return ServiceResult(ok=True, op=op, data={**edge, "added": not already})

    # ------------------------------------------------------------------
    # Read-only reports
    # ------------------------------------------------------------------

    def show(self) -> ServiceResult:
        """Dump the snapshot: ids, adjacency, and JSON-compatible payloads."""
        vertices = {
            vid: payload_to_jsonable(data) for vid, data in get_vertex_data(self._graph).items()
        }
        ids = get_ids(self._graph)
        return ServiceResult(
            ok=True,
            op="show_graph",
            data={
                "count": len(ids),
                "ids": ids,
                "adjacency": get_adjacency(self._graph),
                "vertices": vertices,
            },
        )

    def summary(self) -> ServiceResult:
        """Vertex and edge counts, isolated vertices, and symmetry."""
        g = to_digraph(self._graph)
        isolates = set(nx.isolates(g))
        isolated = [vid for vid in get_ids(self._graph) if vid in isolates]
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "vertex_count": g.number_of_nodes(),
                "edge_count": g.number_of_edges(),
                "isolated": isolated,
                "symmetric": is_symmetric(g),
            },
        )

    def check(self) -> ServiceResult:
        """Report invariant violations in the snapshot."""
        report = check_invariants(self._graph)
        if not report.valid:
            logger.debug("graph.invariant_violation", errors=len(report.errors))
            return ServiceResult.failure(
                "check",
                "INVARIANT_VIOLATION",
                f"{len(report.errors)} invariant violation(s)",
                warnings=report.warnings,
                errors=report.errors,
            )
        return ServiceResult(
            ok=True,
            op="check",
            data={"valid": True, "vertex_count": len(self._graph)},
            warnings=report.warnings,
        )
