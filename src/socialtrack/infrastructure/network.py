"""SocialNetwork — the single dependency injected into every service.

Owns the in-memory :class:`GraphStore` and the engine that searches it,
and remembers which data files have been applied. Like the store, it
lives only as long as the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from socialtrack.domain.dijkstra import ShortestPathEngine
from socialtrack.domain.graph import GraphStore, Weight
from socialtrack.infrastructure.dotfile import LoadReport, load_into

logger = logging.getLogger(__name__)


@dataclass
class SocialNetwork:
    """Graph store plus shortest-path engine over participant names."""

    default_weight: Weight = 1
    store: GraphStore[str] = field(default_factory=GraphStore)
    sources: list[Path] = field(default_factory=list)

    @cached_property
    def engine(self) -> ShortestPathEngine[str]:
        return ShortestPathEngine(self.store)

    @property
    def is_empty(self) -> bool:
        return self.store.node_count == 0

    def load(self, path: str | Path) -> LoadReport:
        """Apply the edge list at *path* with the default weight.

        Raises:
            SourceUnavailableError: if the file cannot be read. Pairs read
                before the failure remain in the store.
        """
        report = load_into(self.store, path, weight=self.default_weight)
        self.sources.append(report.path)
        logger.debug("Network now has %r", self.store)
        return report
