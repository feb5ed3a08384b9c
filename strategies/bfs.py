from strategies.common import SearchOptions, Strategy
from strategies.frontier import StrategyDescriptor, run_frontier_search

# FIFO queue; the first push of the goal is already the fewest-edges route
BFS = StrategyDescriptor(Strategy.BFS)


def run_bfs(graph, start, goal, options=None):
    """Breadth-First Search, goal tested when the goal is pushed."""
    return run_frontier_search(graph, start, goal, BFS, options or SearchOptions())
