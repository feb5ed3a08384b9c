from strategies.common import SearchOptions, Strategy
from strategies.frontier import StrategyDescriptor, run_frontier_search

ASTAR = StrategyDescriptor(Strategy.ASTAR, priority_ordered=True, goal_test_at_pop=True,
                           uses_heuristic=True)


def run_astar(graph, start, goal, options=None):
    """
    Performs A* search from start to goal.
    Args:
        graph: Graph to search
        start: start node id
        goal: goal node id
        options: SearchOptions; heuristic_mode picks euclidean, preset or zero
    Returns:
        History of the run

    Frontier items are ordered by f = g + h. Preset heuristics may be
    inadmissible or inconsistent on purpose, and the run then returns
    whatever path that ordering settles on.
    """
    return run_frontier_search(graph, start, goal, ASTAR, options or SearchOptions())
