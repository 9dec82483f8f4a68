"""
Vertex-object graph implementation.

Implements the Graph interface with Vertex records, each owning its outgoing
target -> weight mapping.
"""

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Generic, Iterator, Mapping, Optional, Tuple

from graph import (
    L,
    Graph,
    GraphConfig,
    check_label,
    check_weight,
    is_hashable,
    register_representation,
    render_mapping,
    same_label,
)

logger = logging.getLogger(__name__)

_NO_EDGES: Mapping = MappingProxyType({})


class Vertex(Generic[L]):
    """
    A labelled vertex and its outgoing edges.

    check_rep enables the weight scan after each add_edge; VerticesGraph
    passes its GraphConfig.check_rep here.
    """

    def __init__(self, label: L, check_rep: bool = True) -> None:
        check_label(label)
        self._label = label
        self._edges: Dict[L, int] = {}
        self._check = check_rep

    def _check_rep(self) -> None:
        if not self._check:
            return
        assert self._label is not None, "label should not be None"
        assert self._edges is not None, "edge map should not be None"
        for target, weight in self._edges.items():
            assert weight > 0, f"edge {self._label!r} -> {target!r} must have a positive weight"

    @property
    def label(self) -> L:
        return self._label

    @property
    def edges(self) -> Mapping[L, int]:
        """Read-only live view of the outgoing edges."""
        return MappingProxyType(self._edges)

    def add_edge(self, target: L, weight: int) -> bool:
        """
        Add, change or remove the edge to target.

        A zero weight removes the edge and reports whether one existed;
        a positive weight stores it and returns True.
        """
        check_label(target, "target")
        check_weight(weight)
        if weight == 0:
            return self.remove_edge(target)
        self._edges[target] = weight
        self._check_rep()
        return True

    def remove_edge(self, target: L) -> bool:
        if not is_hashable(target):
            return False
        return self._edges.pop(target, None) is not None

    def __repr__(self) -> str:
        return f"Vertex({self._label!r})"

    def __str__(self) -> str:
        return f"{self._label} edges: {render_mapping(self._edges)}"


class VerticesGraph(Graph[L]):
    """
    Directed, weighted graph backed by Vertex records.

    Vertices are kept in a label -> Vertex dict, which preserves insertion
    order for rendering.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        super().__init__(config)
        self._vertices: Dict[L, Vertex[L]] = {}
        self._check_rep()

    def _check_rep(self) -> None:
        if not self.config.check_rep:
            return
        assert self._vertices is not None, "vertex index should not be None"
        for label, vertex in self._vertices.items():
            assert vertex is not None, "vertex should not be None"
            assert same_label(vertex.label, label), (
                f"vertex {vertex.label!r} indexed under {label!r}"
            )
            vertex._check_rep()
        for vertex in self._vertices.values():
            for target in vertex.edges:
                assert target in self._vertices, f"edge target {target!r} is not a vertex"

    def _find(self, label: L) -> Optional[Vertex[L]]:
        if not is_hashable(label):
            return None
        return self._vertices.get(label)

    def _find_or_add(self, label: L) -> Vertex[L]:
        vertex = self._find(label)
        if vertex is None:
            vertex = self._vertices[label] = Vertex(label, self.config.check_rep)
            logger.debug("added vertex %r", label)
        return vertex

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex, self.config.check_rep)
        logger.debug("added vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source, "source")
        check_label(target, "target")
        check_weight(weight)

        if weight == 0:
            source_vertex = self._find(source)
            if source_vertex is None:
                return 0
            previous = source_vertex.edges.get(target, 0)
            source_vertex.remove_edge(target)
        else:
            source_vertex = self._find_or_add(source)
            previous = source_vertex.edges.get(target, 0)
            source_vertex.add_edge(target, weight)
            self._find_or_add(target)

        logger.debug("set edge %r -> %r: %d (was %d)", source, target, weight, previous)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        if self._find(vertex) is None:
            return False
        del self._vertices[vertex]
        for other in self._vertices.values():
            other.remove_edge(vertex)
        logger.debug("removed vertex %r", vertex)
        self._check_rep()
        return True

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        if not is_hashable(target):
            return {}
        return {
            label: vertex.edges[target]
            for label, vertex in self._vertices.items()
            if target in vertex.edges
        }

    def targets(self, source: L) -> Mapping[L, int]:
        """Read-only snapshot of the outgoing edges of source."""
        vertex = self._find(source)
        return _NO_EDGES if vertex is None else MappingProxyType(dict(vertex.edges))

    def edges(self) -> Iterator[Tuple[L, L, int]]:
        for vertex in list(self._vertices.values()):
            for target, weight in list(vertex.edges.items()):
                yield vertex.label, target, weight

    def __str__(self) -> str:
        return "".join(f"{vertex}\n" for vertex in self._vertices.values())


register_representation("vertices", VerticesGraph)
