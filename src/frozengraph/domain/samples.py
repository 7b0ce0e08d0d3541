"""Sample data: Australian states and territories and their land borders.

Used by ``frozengraph demo`` and the test suite. The same graph is built two
ways: from literal maps, and by a sequence of insertions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from frozengraph.domain.graph import Graph, VertexId, add_edge, add_vertex, create_graph


@dataclass(frozen=True)
class Region:
    """Payload stored on each region vertex."""

    name: str
    capital: str
    area: int  # km^2


REGIONS: dict[VertexId, Region] = {
    "ACT": Region("Australian Capital Territory", "Canberra", 2280),
    "NSW": Region("New South Wales", "Sydney", 800628),
    "NT": Region("Northern Territory", "Darwin", 1335742),
    "QLD": Region("Queensland", "Brisbane", 1723936),
    "SA": Region("South Australia", "Adelaide", 978810),
    "TAS": Region("Tasmania", "Hobart", 64519),
    "VIC": Region("Victoria", "Melbourne", 227010),
    "WA": Region("Western Australia", "Perth", 2526786),
}

REGION_BORDERS: dict[VertexId, list[VertexId]] = {
    "ACT": ["NSW"],
    "NSW": ["ACT", "VIC", "SA", "QLD"],
    "NT": ["QLD", "SA", "WA"],
    "QLD": ["NSW", "SA", "NT"],
    "SA": ["VIC", "NSW", "QLD", "NT", "WA"],
    "TAS": [],
    "VIC": ["NSW", "SA"],
    "WA": ["SA", "NT"],
}

REGION_EDGES: list[tuple[VertexId, VertexId]] = [
    ("ACT", "NSW"),
    ("VIC", "NSW"),
    ("VIC", "SA"),
    ("NSW", "SA"),
    ("QLD", "NSW"),
    ("QLD", "SA"),
    ("QLD", "NT"),
    ("SA", "NT"),
    ("SA", "WA"),
    ("NT", "WA"),
]


def literal_region_graph() -> Graph[Region]:
    """Build the region graph directly from both maps."""
    return create_graph(REGION_BORDERS, REGIONS)


def imperative_region_graph() -> Graph[Region]:
    """Build the region graph one vertex and one border at a time."""
    graph: Graph[Region] = create_graph()
    for region_id, region in REGIONS.items():
        graph = add_vertex(graph, region_id, region)
    for id1, id2 in REGION_EDGES:
        graph = add_edge(graph, id1, id2)
    return graph


SAMPLE_BUILDERS: dict[str, Callable[[], Graph[Region]]] = {
    "literal": literal_region_graph,
    "imperative": imperative_region_graph,
}
