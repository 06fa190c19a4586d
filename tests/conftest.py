"""Shared pytest fixtures and test helpers for socialtrack tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from socialtrack.domain.graph import GraphStore
from socialtrack.infrastructure.network import SocialNetwork
from socialtrack.services.telemetry import disable_telemetry

# Directed, weighted fixture graph. G -- L appears twice; the second
# insert only rewrites the weight.
FRIENDSHIPS: list[tuple[str, str, int]] = [
    ("D", "G", 2),
    ("D", "A", 7),
    ("G", "L", 7),
    ("I", "L", 5),
    ("F", "G", 9),
    ("I", "D", 1),
    ("H", "I", 2),
    ("I", "H", 2),
    ("A", "H", 8),
    ("H", "B", 6),
    ("G", "L", 7),
    ("A", "B", 1),
    ("A", "M", 5),
    ("B", "M", 3),
    ("M", "E", 3),
    ("M", "F", 4),
]
PEOPLE = ["A", "B", "D", "D", "F", "G", "H", "I", "L", "M", "E"]


def build_store(
    people: list[str] | None = None,
    friendships: list[tuple[str, str, int]] | None = None,
) -> GraphStore[str]:
    """Insert *people* then *friendships* into a fresh store."""
    store: GraphStore[str] = GraphStore()
    for person in PEOPLE if people is None else people:
        store.insert_node(person)
    for source, target, weight in FRIENDSHIPS if friendships is None else friendships:
        store.insert_edge(source, target, weight)
    return store


def path_with_chords(size: int = 21) -> str:
    """DOT text: a path user0..user{size-1} plus two chords.

    With the default size that is 21 participants and 22 friendships.
    """
    lines = ["graph socialnetwork {"]
    lines += [f'    "user{i}" -- "user{i + 1}";' for i in range(size - 1)]
    lines += ['    "user0" -- "user10";', '    "user5" -- "user15";', "}"]
    return "\n".join(lines) + "\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> GraphStore[str]:
    """The eleven-insert, sixteen-edge fixture graph."""
    return build_store()


@pytest.fixture
def network() -> SocialNetwork:
    """An empty network with the default weight."""
    return SocialNetwork()


@pytest.fixture
def dot_file(tmp_path: Path) -> Path:
    """A 21-participant, 22-friendship data file."""
    path = tmp_path / "socialnetwork.dot"
    path.write_text(path_with_chords(), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` enables telemetry for the process; undo it per test."""
    yield
    disable_telemetry()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir so no stray socialtrack.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SOCIALTRACK_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """CLI invocations rebind the root handler to the runner's stderr."""
    import logging

    root = logging.getLogger()
    package = logging.getLogger("socialtrack")
    original_handlers = root.handlers[:]
    original_level = root.level
    original_package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(original_package_level)
