"""
Snapshot and history value types.

A run records one Snapshot after every frontier operation. Snapshots own
copies of everything they show, so the engine can keep mutating its live
frontier, visited set and parent map after recording.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class Status(str, Enum):
    EXPLORING = "exploring"
    FOUND = "found"
    FAILED = "failed"
    LIMIT_REACHED = "limit_reached"

    @property
    def is_terminal(self):
        return self is not Status.EXPLORING


class Side(str, Enum):
    """Which half of a bidirectional search an item or step belongs to."""
    START = "start"
    END = "end"


@dataclass(frozen=True)
class FrontierItem:
    id: int
    cost: float = 0
    priority: float = 0
    h: float = 0
    path_length: int = 0
    side: Optional[Side] = None


@dataclass(frozen=True)
class Snapshot:
    """Engine state at one instant of a run.

    Attributes:
        frontier: frontier items in container order (stack bottom first for DFS)
        visited: ids marked visited so far
        parents: read-only child -> parent map; for bidirectional runs this is
            the merged map of both sides with the end side winning on overlap
        current: node about to be processed, or the goal/intersection on found
        status: exploring until the single terminal snapshot
        active_side: bidirectional runs only
        intersect: bidirectional runs only, set on the found snapshot
        parents_start: bidirectional runs only, start-side parent map
        parents_end: bidirectional runs only, end-side parent map
    """

    frontier: tuple
    visited: frozenset
    parents: MappingProxyType
    current: Optional[int]
    status: Status
    active_side: Optional[Side] = None
    intersect: Optional[int] = None
    parents_start: Optional[MappingProxyType] = None
    parents_end: Optional[MappingProxyType] = None

    @property
    def frontier_ids(self):
        return [item.id for item in self.frontier]


def _frozen_map(mapping):
    return MappingProxyType(dict(mapping))


class HistoryRecorder:
    """Collects snapshots for one run and enforces the status lifecycle."""

    def __init__(self):
        self._snapshots = []
        self._terminated = False

    @property
    def terminated(self):
        return self._terminated

    def record(self, frontier, visited, parents, current, status=Status.EXPLORING,
               active_side=None, intersect=None, parents_start=None, parents_end=None):
        if self._terminated:
            raise RuntimeError("cannot record after a terminal snapshot")
        snapshot = Snapshot(
            frontier=tuple(frontier),
            visited=frozenset(visited),
            parents=_frozen_map(parents),
            current=current,
            status=Status(status),
            active_side=active_side,
            intersect=intersect,
            parents_start=_frozen_map(parents_start) if parents_start is not None else None,
            parents_end=_frozen_map(parents_end) if parents_end is not None else None,
        )
        self._snapshots.append(snapshot)
        if snapshot.status.is_terminal:
            self._terminated = True
        return snapshot

    def freeze(self, strategy, start, goal, options):
        return History(tuple(self._snapshots), strategy, start, goal, options)


@dataclass(frozen=True)
class History(Sequence):
    """The immutable, ordered trace produced by one search run."""

    snapshots: tuple
    strategy: object
    start: int
    goal: int
    options: object

    def __getitem__(self, index):
        return self.snapshots[index]

    def __len__(self):
        return len(self.snapshots)

    def __iter__(self):
        return iter(self.snapshots)

    @property
    def final(self):
        return self.snapshots[-1] if self.snapshots else None

    @property
    def status(self):
        return self.final.status if self.snapshots else None

    @property
    def found(self):
        return self.status is Status.FOUND
