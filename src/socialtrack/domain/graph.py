"""GraphStore — labeled nodes and directed weighted edges, held in memory.

Each node keeps two ordered edge lists: ``leaving`` (node is the source)
and ``entering`` (node is the target). The shortest-path engine walks the
graph only through :meth:`GraphStore.leaving` and
:meth:`GraphStore.entering`; the label-to-node registry stays private
to the store.

Inserting an edge for an ordered pair that already has one updates the
existing edge's weight instead of adding a parallel edge, so
``edge_count`` counts distinct ordered pairs.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from numbers import Real

from socialtrack.domain.errors import (
    InvalidWeightError,
    MissingEndpointError,
    UnknownLabelError,
)

type Weight = int | float


@dataclass(eq=False)
class Node[L: Hashable]:
    """A labeled vertex with its leaving and entering edges."""

    label: L
    leaving: list[Edge[L]] = field(default_factory=list)
    entering: list[Edge[L]] = field(default_factory=list)


@dataclass(eq=False)
class Edge[L: Hashable]:
    """A directed edge ``predecessor -> successor`` carrying a weight."""

    predecessor: Node[L]
    successor: Node[L]
    weight: Weight

    @property
    def cost(self) -> float:
        """The weight as a float, for cost arithmetic."""
        return float(self.weight)

    def __repr__(self) -> str:
        return (
            f"Edge({self.predecessor.label!r} -> {self.successor.label!r}, "
            f"weight={self.weight!r})"
        )


def validate_weight(weight: object) -> Weight:
    """Return *weight* unchanged if it is a usable edge weight.

    Raises:
        InvalidWeightError: for booleans, non-numbers, negative or
            non-finite values.
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(weight)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(weight)
    return weight  # type: ignore[return-value]


class GraphStore[L: Hashable]:
    """Mutable in-memory graph keyed by node label.

    Usage::

        store: GraphStore[str] = GraphStore()
        store.insert_node("alice")
        store.insert_node("bob")
        store.insert_edge("alice", "bob", 1)
        store.leaving("alice")   # (Edge('alice' -> 'bob', weight=1),)
    """

    def __init__(self) -> None:
        self._nodes: dict[L, Node[L]] = {}
        self._edges: dict[tuple[L, L], Edge[L]] = {}
        self._edge_count = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_node(self, label: L) -> bool:
        """Add a node for *label* if absent.

        Returns True if a node was created, False if it already existed.
        """
        if label is None:
            raise UnknownLabelError(label)
        if label in self._nodes:
            return False
        self._nodes[label] = Node(label)
        return True

    def insert_edge(self, predecessor: L, successor: L, weight: Weight) -> bool:
        """Insert the directed edge ``predecessor -> successor``.

        Both labels must already be nodes. If the ordered pair already has
        an edge its weight is replaced and False is returned; otherwise a
        new edge is attached and True is returned.

        Raises:
            MissingEndpointError: if either label is not a node.
            InvalidWeightError: if *weight* is not a non-negative number.
        """
        missing = [lbl for lbl in (predecessor, successor) if lbl not in self._nodes]
        if missing:
            raise MissingEndpointError(list(dict.fromkeys(missing)))
        weight = validate_weight(weight)

        key = (predecessor, successor)
        existing = self._edges.get(key)
        if existing is not None:
            existing.weight = weight
            return False

        source = self._nodes[predecessor]
        target = self._nodes[successor]
        edge = Edge(source, target, weight)
        source.leaving.append(edge)
        target.entering.append(edge)
        self._edges[key] = edge
        self._edge_count += 1
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def has_node(self, label: L) -> bool:
        return label in self._nodes

    def has_edge(self, predecessor: L, successor: L) -> bool:
        return (predecessor, successor) in self._edges

    def get_weight(self, predecessor: L, successor: L) -> Weight:
        """Return the weight of the directed edge ``predecessor -> successor``."""
        edge = self._edges.get((predecessor, successor))
        if edge is None:
            raise KeyError((predecessor, successor))
        return edge.weight

    def labels(self) -> Iterator[L]:
        """Iterate node labels in insertion order."""
        return iter(self._nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Traversal capability (consumed by the shortest-path engine)
    # ------------------------------------------------------------------

    def leaving(self, label: L) -> tuple[Edge[L], ...]:
        """Edges where *label* is the source, in insertion order."""
        return tuple(self._node(label).leaving)

    def entering(self, label: L) -> tuple[Edge[L], ...]:
        """Edges where *label* is the target, in insertion order."""
        return tuple(self._node(label).entering)

    def _node(self, label: L) -> Node[L]:
        try:
            return self._nodes[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count}, edges={self.edge_count})"
