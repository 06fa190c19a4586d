"""ShortestPathEngine — Dijkstra over a directed store, traversed both ways.

Edges are stored directed, but the search relaxes every leaving edge
(towards its successor) and every entering edge (towards its predecessor),
so reachability is that of the undirected graph. Weights are accumulated
as floats.

Improvements push a fresh ``SearchNode`` onto the heap instead of
decreasing a key; superseded entries are skipped when popped. The search
stops the first time the end label is popped.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from socialtrack.domain.errors import NoPathFoundError, UnknownLabelError

if TYPE_CHECKING:
    from socialtrack.domain.graph import Edge

logger = logging.getLogger(__name__)


class TraversalView[L: Hashable](Protocol):
    """What the engine needs from a graph: membership plus edge lists."""

    def has_node(self, label: L) -> bool: ...

    def leaving(self, label: L) -> Sequence[Edge[L]]: ...

    def entering(self, label: L) -> Sequence[Edge[L]]: ...


@dataclass(frozen=True, slots=True)
class SearchNode[L: Hashable]:
    """Endpoint of one candidate path discovered during a search.

    Attributes:
        label: Label of the graph node this path ends at.
        cost: Total weight of the path from the start label.
        predecessor: SearchNode for the previous hop, None at the start.
    """

    label: L
    cost: float
    predecessor: SearchNode[L] | None = None

    def labels(self) -> list[L]:
        """Labels along this path, start first."""
        chain: list[L] = []
        node: SearchNode[L] | None = self
        while node is not None:
            chain.append(node.label)
            node = node.predecessor
        chain.reverse()
        return chain


@dataclass(frozen=True)
class ClosestConnection[L: Hashable]:
    """Minimum-cost path between two labels."""

    path: list[L]
    cost: float
    intermediary_count: int

    @property
    def source(self) -> L:
        return self.path[0]

    @property
    def target(self) -> L:
        return self.path[-1]

    @property
    def hops(self) -> int:
        return len(self.path) - 1


def intermediary_count(path: Sequence[object]) -> int:
    """Number of labels strictly between the two ends of *path*."""
    if len(path) < 2:
        return 0
    return len(path) - 2


class ShortestPathEngine[L: Hashable]:
    """Shortest-path queries over a :class:`TraversalView`.

    Usage::

        engine = ShortestPathEngine(store)
        engine.shortest_path_labels("D", "L")   # ["D", "G", "L"]
        engine.shortest_path_cost("D", "L")     # 9.0

    Raises :class:`UnknownLabelError` for a ``None`` or absent label and
    :class:`NoPathFoundError` when the labels are disconnected. Both are
    :class:`NoSuchElementError`.
    """

    def __init__(self, graph: TraversalView[L]) -> None:
        self._graph = graph

    def compute_shortest_path(self, start: L, end: L) -> SearchNode[L]:
        """Run the search and return the SearchNode that reached *end*.

        Its ``cost`` is the minimum path cost and its predecessor chain
        spells the path backwards.
        """
        for label in (start, end):
            if label is None or not self._graph.has_node(label):
                raise UnknownLabelError(label)

        # Sequence numbers keep equal-cost entries in insertion order.
        counter = itertools.count()
        root: SearchNode[L] = SearchNode(start, 0.0)
        queue: list[tuple[float, int, SearchNode[L]]] = [(0.0, next(counter), root)]
        best: dict[L, float] = {start: 0.0}
        popped = 0

        while queue:
            cost, _, current = heapq.heappop(queue)
            popped += 1
            if cost > best[current.label]:
                continue
            if current.label == end:
                if not logger.isEnabledFor(logging.DEBUG):
                    return current
                logger.debug(
                    "shortest path %r -> %r: cost=%s hops=%d popped=%d",
                    start,
                    end,
                    cost,
                    len(current.labels()) - 1,
                    popped,
                )
                return current

            for edge in self._graph.leaving(current.label):
                self._relax(queue, best, counter, current, edge.successor.label, edge.cost)
            for edge in self._graph.entering(current.label):
                self._relax(queue, best, counter, current, edge.predecessor.label, edge.cost)

        raise NoPathFoundError(start, end)

    @staticmethod
    def _relax(
        queue: list[tuple[float, int, SearchNode[L]]],
        best: dict[L, float],
        counter: itertools.count[int],
        current: SearchNode[L],
        neighbor: L,
        weight: float,
    ) -> None:
        tentative = current.cost + weight
        known = best.get(neighbor)
        if known is None or tentative < known:
            best[neighbor] = tentative
            entry = SearchNode(neighbor, tentative, current)
            heapq.heappush(queue, (tentative, next(counter), entry))

    def shortest_path_labels(self, start: L, end: L) -> list[L]:
        """Labels on a minimum-cost path from *start* to *end*, inclusive."""
        return self.compute_shortest_path(start, end).labels()

    def shortest_path_cost(self, start: L, end: L) -> float:
        """Summed edge weight of a minimum-cost path from *start* to *end*."""
        return self.compute_shortest_path(start, end).cost

    def closest_connection(self, start: L, end: L) -> ClosestConnection[L]:
        """Path, cost and intermediary count from a single search."""
        terminal = self.compute_shortest_path(start, end)
        path = terminal.labels()
        return ClosestConnection(
            path=path,
            cost=terminal.cost,
            intermediary_count=intermediary_count(path),
        )
