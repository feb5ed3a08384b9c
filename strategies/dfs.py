from strategies.common import SearchOptions, Strategy
from strategies.frontier import StrategyDescriptor, run_frontier_search

# Stack; neighbours are pushed in reverse label order so the smallest label
# ends on top and is expanded first
DFS = StrategyDescriptor(Strategy.DFS, lifo=True)


def run_dfs(graph, start, goal, options=None):
    """Depth-First Search: returns the History of the run."""
    return run_frontier_search(graph, start, goal, DFS, options or SearchOptions())
