"""Error taxonomy for the graph store and shortest-path engine.

The domain layer raises these; the service layer maps them onto
``ServiceError`` codes. Nothing here is retried.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from pathlib import Path


class SocialTrackError(Exception):
    """Base class for all socialtrack errors."""


class MissingEndpointError(SocialTrackError, LookupError):
    """Edge insertion or lookup referenced a label that is not a node."""

    def __init__(self, missing: Iterable[Hashable]) -> None:
        self.missing = tuple(missing)
        names = ", ".join(repr(m) for m in self.missing)
        super().__init__(f"Missing edge endpoint(s): {names}")


class NoSuchElementError(SocialTrackError, LookupError):
    """A shortest-path query could not produce a path."""


class UnknownLabelError(NoSuchElementError):
    """A queried label is ``None`` or not present in the store."""

    def __init__(self, label: Hashable | None) -> None:
        self.label = label
        super().__init__(f"Node {label!r} not found in graph")


class NoPathFoundError(NoSuchElementError):
    """Both labels exist but no edge sequence connects them."""

    def __init__(self, start: Hashable, end: Hashable) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No path between {start!r} and {end!r}")


class InvalidWeightError(SocialTrackError, ValueError):
    """Edge weight is negative, non-finite, or not a number."""

    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(f"Edge weight must be a non-negative finite number, got {weight!r}")


class SourceUnavailableError(SocialTrackError):
    """The graph description file could not be opened."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Cannot open data file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
