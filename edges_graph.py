"""
Edge-list graph implementation.

Implements the Graph interface with a vertex set plus a flat list of
immutable Edge records.
"""

from dataclasses import dataclass
import logging
from typing import Dict, FrozenSet, Generic, Iterator, List, Optional, Tuple

from graph import (
    L,
    Graph,
    GraphConfig,
    check_label,
    check_weight,
    is_hashable,
    register_representation,
    render_collection,
    same_label,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Immutable directed edge source -> target.

    The weight may be 0 on a standalone edge; EdgesGraph only stores
    positive ones.
    """

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        check_label(self.source, "source")
        check_label(self.target, "target")
        check_weight(self.weight)

    def connects(self, source: L, target: L) -> bool:
        return same_label(self.source, source) and same_label(self.target, target)

    def touches(self, vertex: L) -> bool:
        return same_label(self.source, vertex) or same_label(self.target, vertex)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgesGraph(Graph[L]):
    """
    Directed, weighted graph backed by a vertex set and a list of edges.

    Queries scan the edge list on every call; nothing is cached.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        super().__init__(config)
        # dict keys as an insertion-ordered set
        self._vertices: Dict[L, None] = {}
        self._edges: List[Edge[L]] = []
        self._check_rep()

    def _check_rep(self) -> None:
        if not self.config.check_rep:
            return
        assert self._vertices is not None, "vertex set should not be None"
        assert self._edges is not None, "edge list should not be None"
        pairs = set()
        for edge in self._edges:
            assert edge is not None, "edge should not be None"
            assert edge.source in self._vertices, f"edge source {edge.source!r} is not a vertex"
            assert edge.target in self._vertices, f"edge target {edge.target!r} is not a vertex"
            assert edge.weight > 0, f"stored edge {edge} must have a positive weight"
            pair = (edge.source, edge.target)
            assert pair not in pairs, f"duplicate edge {edge.source!r} -> {edge.target!r}"
            pairs.add(pair)

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = None
        logger.debug("added vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source, "source")
        check_label(target, "target")
        check_weight(weight)
        # Build the replacement before touching stored state.
        replacement = Edge(source, target, weight) if weight > 0 else None

        previous = 0
        for i, edge in enumerate(self._edges):
            if edge.connects(source, target):
                previous = edge.weight
                del self._edges[i]
                break

        if replacement is not None:
            self._edges.append(replacement)
            self._vertices.setdefault(source, None)
            self._vertices.setdefault(target, None)

        logger.debug("set edge %r -> %r: %d (was %d)", source, target, weight, previous)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        if not is_hashable(vertex) or vertex not in self._vertices:
            return False
        del self._vertices[vertex]
        self._edges = [edge for edge in self._edges if not edge.touches(vertex)]
        logger.debug("removed vertex %r", vertex)
        self._check_rep()
        return True

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {
            edge.source: edge.weight for edge in self._edges if same_label(edge.target, target)
        }

    def targets(self, source: L) -> Dict[L, int]:
        return {
            edge.target: edge.weight for edge in self._edges if same_label(edge.source, source)
        }

    def edges(self) -> Iterator[Tuple[L, L, int]]:
        for edge in list(self._edges):
            yield edge.source, edge.target, edge.weight

    def __str__(self) -> str:
        lines = [f"Vertices: {render_collection(self._vertices)}\nEdges:\n"]
        lines.extend(f"{edge}\n" for edge in self._edges)
        return "".join(lines)


register_representation("edges", EdgesGraph)
