"""
Directed, weighted graph abstraction.

Vertices are hashable labels.
Edges are directed: source -> target with a strictly positive int weight.
A weight of 0 means "no edge".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)


L = TypeVar("L", bound=Hashable)


class InvalidArgumentError(ValueError):
    """Raised when a label or weight cannot be stored in a graph."""


@dataclass(frozen=True)
class GraphConfig:
    """
    Per-instance settings shared by every representation.

    check_rep:
        Run the representation-invariant scan after each mutation. The scan is
        made of assert statements, so it is also skipped under ``python -O``.
    """

    check_rep: bool = True


DEFAULT_CONFIG = GraphConfig()


def is_hashable(label: object) -> bool:
    try:
        hash(label)
    except TypeError:
        return False
    return True


def same_label(a: object, b: object) -> bool:
    """Label equality as dict and set lookups see it (identity, then ==)."""
    return a is b or a == b


def check_label(label: object, role: str = "vertex") -> None:
    if label is None:
        raise InvalidArgumentError(f"{role} label cannot be None")
    if not is_hashable(label):
        raise TypeError(f"{role} label must be hashable, got {type(label).__name__}")


def check_weight(weight: object) -> None:
    """Reject anything that is not a non-negative int."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight cannot be negative: {weight}")


def render_collection(items: Iterable[object]) -> str:
    """Render items as ``[a, b, c]``."""
    return "[" + ", ".join(str(item) for item in items) + "]"


def render_mapping(mapping: Mapping[object, object]) -> str:
    """Render a mapping as ``{k=v, k=v}``."""
    return "{" + ", ".join(f"{k}={v}" for k, v in mapping.items()) + "}"


class Graph(ABC, Generic[L]):
    """Mutable directed, weighted graph over labels of type L."""

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    # --- Graph interface -----------------------------------------------------

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """
        Add vertex if it is not already present.

        Returns: True iff the vertex was newly inserted.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, change or remove the edge source -> target.

        A positive weight inserts or overwrites the edge and adds both
        endpoints as vertices. A zero weight removes the edge if present and
        never adds vertices.

        Returns: the previous weight of the edge, or 0 if there was none.
        Raises: InvalidArgumentError on a negative weight or None label.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """
        Remove vertex and every edge it is the source or target of.

        Returns: True iff the vertex was present.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> FrozenSet[L]:
        """Return an immutable snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Mapping[L, int]:
        """
        Incoming neighbors and edge weights for target.

        Returns: mapping source -> weight; empty if target is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Mapping[L, int]:
        """
        Outgoing neighbors and edge weights for source.

        Returns: mapping target -> weight; empty if source is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterator[Tuple[L, L, int]]:
        """Yield (source, target, weight) for every edge in storage order."""
        raise NotImplementedError

    # --- Derived helpers -----------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices()

    def __len__(self) -> int:
        return len(self.vertices())

    def same_structure(self, other: "Graph[L]") -> bool:
        """True if both graphs hold the same vertices and weighted edges."""
        if self.vertices() != other.vertices():
            return False
        mine = {(s, t): w for s, t, w in self.edges()}
        theirs = {(s, t): w for s, t, w in other.edges()}
        return mine == theirs


REPRESENTATIONS: Dict[str, Callable[[Optional[GraphConfig]], Graph]] = {}


def register_representation(
    name: str, factory: Callable[[Optional[GraphConfig]], Graph]
) -> None:
    """
    Register a graph class (or factory) under name.

    Raises ValueError if name is already taken.
    """
    if name in REPRESENTATIONS:
        raise ValueError(f"Graph representation '{name}' is already registered.")
    REPRESENTATIONS[name] = factory


def empty_graph(kind: str = "edges", config: Optional[GraphConfig] = None) -> Graph:
    """Return a new empty graph of the named representation."""
    # Both built-in representations register themselves on import.
    import edges_graph  # noqa: F401
    import vertices_graph  # noqa: F401

    try:
        factory = REPRESENTATIONS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown graph representation '{kind}'; "
            f"expected one of {sorted(REPRESENTATIONS)}"
        ) from None
    return factory(config)
