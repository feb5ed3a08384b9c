"""
Ground-truth oracle.

Runs the engine with fixed, duplicate-suppressing configurations to get the
reference metrics a run is judged against. The engine itself never calls
into this module.
"""

import itertools
import logging
import math
from typing import NamedTuple

from pathing import reconstruct
from strategies import HeuristicMode, SearchOptions
from strategies.bfs import run_bfs
from strategies.dijkstra import run_dijkstra
from util import Graph

logger = logging.getLogger(__name__)

ORACLE_OPTIONS = SearchOptions(suppress_revisits=True, heuristic_mode=HeuristicMode.ZERO)


class GroundTruth(NamedTuple):
    min_edges: float
    min_cost: float


def _found_path(history):
    if not history.found:
        return None
    return reconstruct(history.final.parents, history.start, history.goal)


def ground_truth(graph, start, goal):
    """Reference edge count and cost between start and goal.

    Args:
        graph: Graph, or a {"nodes": [...], "edges": [...]} mapping
        start: start node id
        goal: goal node id
    Returns:
        GroundTruth(min_edges, min_cost); a metric is math.inf when its run
        did not reach the goal
    """
    graph = Graph.coerce(graph)
    graph.require(start, goal)

    bfs_path = _found_path(run_bfs(graph, start, goal, ORACLE_OPTIONS))
    min_edges = len(bfs_path) - 1 if bfs_path is not None else math.inf

    dijkstra_path = _found_path(run_dijkstra(graph, start, goal, ORACLE_OPTIONS))
    min_cost = graph.path_cost(dijkstra_path) if dijkstra_path is not None else math.inf

    logger.debug("ground truth %s -> %s: edges=%s cost=%s", start, goal, min_edges, min_cost)
    return GroundTruth(min_edges, min_cost)


def ground_truth_table(graph, key_nodes=None):
    """Precompute ground truth between all ordered pairs of key nodes.

    key_nodes: iterable of node ids to consider; by default every node.
    Returns a dict {(a, b): GroundTruth, ...}
    """
    graph = Graph.coerce(graph)
    if key_nodes is None:
        key_nodes = sorted(graph.nodes)
    else:
        key_nodes = list(key_nodes)

    return {(a, b): ground_truth(graph, a, b) for a, b in itertools.permutations(key_nodes, 2)}
