from strategies.common import SearchOptions, Strategy
from strategies.frontier import StrategyDescriptor, run_frontier_search

DIJKSTRA = StrategyDescriptor(Strategy.DIJKSTRA, priority_ordered=True, goal_test_at_pop=True)


def run_dijkstra(graph, start, goal, options=None):
    """
    Dijkstra's algorithm - uninformed cheapest-first search.
    Args:
        graph: Graph to search
        start: start node id
        goal: goal node id
        options: SearchOptions; the heuristic mode is ignored
    Returns:
        History of the run

    The goal is tested when it is popped, since a cheaper route to it may
    still turn up after it is first pushed.
    """
    return run_frontier_search(graph, start, goal, DIJKSTRA, options or SearchOptions())
