"""NetworkService — load, statistics, and closest-connection queries.

Three surfaces over the :class:`SocialNetwork`:

- load: apply a DOT-like edge list (missing files are reported, not raised)
- stats: node count, edge count, average friends per participant
- connection: minimum-cost path between two participants

Domain exceptions are translated into ``ServiceError`` codes here.
"""

from __future__ import annotations

import logging
from pathlib import Path

from socialtrack.domain.errors import (
    InvalidWeightError,
    NoPathFoundError,
    SourceUnavailableError,
    UnknownLabelError,
)
from socialtrack.services.base import BaseService
from socialtrack.services.result import (
    EMPTY_GRAPH,
    INVALID_INPUT,
    NO_PATH,
    NOT_FOUND,
    SOURCE_UNAVAILABLE,
    ServiceResult,
)
from socialtrack.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def format_summary(node_count: int, edge_count: int, average: float, *, decimals: int = 2) -> str:
    """Render the three-line statistics report."""
    return (
        f"Number of Nodes: {node_count}\n"
        f"Number of Edges: {edge_count}\n"
        f"Average Number of Friends: {average:.{decimals}f}"
    )


class NetworkService(BaseService):
    """Handles loading and querying the social network."""

    # ------------------------------------------------------------------
    # load: ingest an edge-list file
    # ------------------------------------------------------------------

    @traced
    def load(self, path: str | Path) -> ServiceResult:
        """Load participants and friendships from *path*.

        An unreadable file yields ``SOURCE_UNAVAILABLE``; whatever was read
        before the failure stays loaded. An unusable default weight yields
        ``INVALID_INPUT`` and leaves the store untouched.
        """
        op = "load"
        store = self._network.store
        nodes_before = store.node_count
        edges_before = store.edge_count

        with trace_span("read_edges") as span:
            try:
                report = self._network.load(path)
            except SourceUnavailableError as exc:
                logger.debug("Data file unavailable: %s", exc)
                return ServiceResult.failure(
                    op,
                    SOURCE_UNAVAILABLE,
                    f"File not found or unreadable: {exc.path}",
                    path=str(exc.path),
                    reason=exc.reason,
                    nodes_added=store.node_count - nodes_before,
                    edges_added=store.edge_count - edges_before,
                )
            except InvalidWeightError as exc:
                return ServiceResult.failure(
                    op,
                    INVALID_INPUT,
                    f"Default weight {exc.weight!r} is not a non-negative finite number",
                    weight=repr(exc.weight),
                )
            if span:
                span.annotate("edges_read", report.edges_read)

        warnings: list[str] = []
        if report.edges_read == 0:
            warnings.append(f"No edge lines found in {report.path}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(report.path),
                "edges_read": report.edges_read,
                "nodes_added": report.nodes_added,
                "edges_added": report.edges_added,
                "node_count": store.node_count,
                "edge_count": store.edge_count,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # stats: counts and average friends
    # ------------------------------------------------------------------

    @traced
    def stats(self, *, decimals: int = 2) -> ServiceResult:
        """Number of participants, friendships, and friendships per participant."""
        store = self._network.store
        node_count = store.node_count
        edge_count = store.edge_count

        if node_count == 0:
            return ServiceResult.failure(
                "stats",
                EMPTY_GRAPH,
                "No data loaded; load a data file first",
            )

        average = edge_count / node_count
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "node_count": node_count,
                "edge_count": edge_count,
                "average_friends": round(average, decimals),
                "summary": format_summary(node_count, edge_count, average, decimals=decimals),
            },
        )

    # ------------------------------------------------------------------
    # connection: shortest path between two participants
    # ------------------------------------------------------------------

    @traced
    def connection(self, person1: str, person2: str) -> ServiceResult:
        """Closest connection between *person1* and *person2*.

        Edges count in both directions; every friendship costs its weight.
        """
        op = "connection"
        source, target = person1.strip(), person2.strip()
        if not source or not target:
            return ServiceResult.failure(op, INVALID_INPUT, "Two participant names are required")

        with trace_span("dijkstra") as span:
            try:
                found = self._network.engine.closest_connection(source, target)
            except UnknownLabelError as exc:
                return ServiceResult.failure(
                    op,
                    NOT_FOUND,
                    f"Participant '{exc.label}' not found in graph",
                    label=exc.label,
                )
            except NoPathFoundError:
                return ServiceResult.failure(
                    op,
                    NO_PATH,
                    f"No connection between '{source}' and '{target}'",
                    source=source,
                    target=target,
                )
            if span:
                span.annotate("hops", found.hops)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "target": target,
                "path": found.path,
                "cost": found.cost,
                "length": found.hops,
                "intermediary_count": found.intermediary_count,
            },
        )
