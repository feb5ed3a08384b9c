import math

from errors import MissingHeuristic
from strategies.common import HeuristicMode, euclidean


def heuristic(graph, node_id, goal_id, mode):
    """Estimated remaining cost from node_id to goal_id.

    Args:
        graph: Graph holding coordinates and preset values
        node_id: node being estimated
        goal_id: search goal
        mode: HeuristicMode (or its string value)
    Returns:
        float estimate; euclidean distances are floored to match the integer
        edge weights of generated graphs
    """
    mode = HeuristicMode(mode)
    if mode is HeuristicMode.ZERO:
        return 0
    if mode is HeuristicMode.PRESET:
        h = graph.nodes[node_id].h
        if h is None:
            raise MissingHeuristic(node_id)
        return h
    return math.floor(euclidean(graph.get_coordinates(node_id), graph.get_coordinates(goal_id)))


def validate_heuristics(graph, mode):
    """Raises MissingHeuristic for the first node lacking ``h`` in preset mode."""
    if HeuristicMode(mode) is not HeuristicMode.PRESET:
        return
    for node_id in sorted(graph.nodes):
        if graph.nodes[node_id].h is None:
            raise MissingHeuristic(node_id)
