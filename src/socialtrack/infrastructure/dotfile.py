"""Edge-list reader for the DOT-like social network format.

Each relevant line is an undirected pair of labels, optionally quoted and
optionally terminated by ``;``::

    graph socialnetwork {
        "user0" -- "user8";
        user8 -- user26
    }

Blank lines, lone braces, ``//`` or ``#`` comments and any line without
``--`` are ignored, which covers ``graph``/``digraph``/``strict`` headers.
A label that happens to be one of those keywords is still read.
Every pair is loaded as two node inserts and one directed edge insert
with the default weight. Nothing is rolled back when reading fails.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from socialtrack.domain.errors import SourceUnavailableError
from socialtrack.domain.graph import GraphStore, Weight, validate_weight

logger = logging.getLogger(__name__)

EDGE_OPERATOR = "--"
_SKIPPED_LINES = frozenset({"{", "}"})
_COMMENT_PREFIXES = ("//", "#")


@dataclass(frozen=True)
class LoadReport:
    """Counts produced by :func:`load_into`."""

    path: Path
    edges_read: int
    nodes_added: int
    edges_added: int


def _clean_label(raw: str) -> str:
    return raw.replace('"', "").strip()


def parse_edge_line(line: str) -> tuple[str, str] | None:
    """Return the ``(first, second)`` labels on *line*, or None to skip it."""
    text = line.strip()
    if not text or text in _SKIPPED_LINES or text.startswith(_COMMENT_PREFIXES):
        return None
    if text.endswith(";"):
        text = text[:-1].rstrip()
    if EDGE_OPERATOR not in text:
        return None

    parts = text.split(EDGE_OPERATOR)
    first, second = _clean_label(parts[0]), _clean_label(parts[1])
    if not first or not second:
        logger.debug("Skipping edge line with an empty label: %r", line)
        return None
    return first, second


def read_edges(path: str | Path) -> Iterator[tuple[str, str]]:
    """Yield label pairs from the file at *path*, in file order.

    Raises:
        SourceUnavailableError: on first iteration if the file cannot be
            opened, or while reading if it is not valid UTF-8.
    """
    p = Path(path)
    try:
        fh = p.open(encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailableError(p, exc.strerror or type(exc).__name__) from exc

    with fh:
        try:
            for line in fh:
                pair = parse_edge_line(line)
                if pair is not None:
                    yield pair
        except UnicodeDecodeError as exc:
            raise SourceUnavailableError(p, "not valid UTF-8") from exc


def load_into(store: GraphStore[str], path: str | Path, *, weight: Weight = 1) -> LoadReport:
    """Insert every pair from *path* into *store* with *weight*.

    Pairs applied before a failure stay in the store. An unusable
    *weight* raises :class:`InvalidWeightError` before anything is read.
    """
    weight = validate_weight(weight)
    p = Path(path)
    edges_read = 0
    nodes_added = 0
    edges_added = 0

    for first, second in read_edges(p):
        edges_read += 1
        nodes_added += store.insert_node(first)
        nodes_added += store.insert_node(second)
        edges_added += store.insert_edge(first, second, weight)

    logger.debug(
        "Loaded %s: %d edge lines, %d new nodes, %d new edges",
        p,
        edges_read,
        nodes_added,
        edges_added,
    )
    return LoadReport(
        path=p,
        edges_read=edges_read,
        nodes_added=nodes_added,
        edges_added=edges_added,
    )
