"""Package exposing search strategy implementations."""

from .common import HeuristicMode, SearchOptions, Strategy
from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar
from .bidirectional import run_bidirectional_bfs

RUNNERS = {
    Strategy.BFS: run_bfs,
    Strategy.DFS: run_dfs,
    Strategy.DIJKSTRA: run_dijkstra,
    Strategy.ASTAR: run_astar,
    Strategy.BIDIRECTIONAL_BFS: run_bidirectional_bfs,
}

__all__ = [
    "HeuristicMode", "SearchOptions", "Strategy", "RUNNERS",
    "run_dfs", "run_bfs", "run_dijkstra", "run_astar", "run_bidirectional_bfs",
]
