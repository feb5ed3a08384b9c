import math
from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    BFS = "BFS"
    DFS = "DFS"
    DIJKSTRA = "DIJKSTRA"
    ASTAR = "AS"
    BIDIRECTIONAL_BFS = "BIBFS"

    @classmethod
    def parse(cls, name):
        """Resolves a strategy tag or one of its case-insensitive aliases."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace("*", "STAR").replace("_", "").replace("-", "")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown strategy: {name}") from None


_ALIASES = {
    "BFS": Strategy.BFS,
    "DFS": Strategy.DFS,
    "DIJKSTRA": Strategy.DIJKSTRA,
    "AS": Strategy.ASTAR,
    "ASTAR": Strategy.ASTAR,
    "BIBFS": Strategy.BIDIRECTIONAL_BFS,
    "BIDIRECTIONALBFS": Strategy.BIDIRECTIONAL_BFS,
}


class HeuristicMode(str, Enum):
    EUCLIDEAN = "euclidean"
    PRESET = "preset"
    ZERO = "zero"


@dataclass(frozen=True)
class SearchOptions:
    """Run configuration.

    suppress_revisits: never push a visited or frontier-resident node and
        never reprocess a visited one
    heuristic_mode: how A* estimates the remaining cost
    """
    suppress_revisits: bool = True
    heuristic_mode: HeuristicMode = HeuristicMode.EUCLIDEAN

    def __post_init__(self):
        if not isinstance(self.suppress_revisits, bool):
            raise ValueError(f"suppress_revisits must be a bool, got {self.suppress_revisits!r}")
        try:
            mode = HeuristicMode(self.heuristic_mode)
        except ValueError:
            raise ValueError(f"Unknown heuristic mode: {self.heuristic_mode!r}") from None
        # frozen dataclass, so bypass __setattr__ to store the coerced enum
        object.__setattr__(self, "heuristic_mode", mode)


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)
