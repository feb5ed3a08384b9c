"""
Shared execution skeleton for the single-frontier strategies.

BFS, DFS, Dijkstra and A* differ only in the handful of switches held by a
StrategyDescriptor; the loop below reads those switches and nothing else.
"""

import logging
from dataclasses import dataclass
from operator import attrgetter

import constants
from history import FrontierItem, HistoryRecorder, Status
from strategies.common import Strategy
from strategies.heuristics import heuristic, validate_heuristics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyDescriptor:
    """Per-strategy policy switches.

    lifo: pop from the end of the frontier (stack) and push neighbours in
        reverse label order so the smallest label is expanded first
    priority_ordered: stable-sort the frontier by priority before each pop
    goal_test_at_pop: test the goal when a node is removed rather than pushed
    uses_heuristic: add the heuristic estimate to the priority of pushed items
    """
    strategy: Strategy
    lifo: bool = False
    priority_ordered: bool = False
    goal_test_at_pop: bool = False
    uses_heuristic: bool = False


def _sorted_neighbors(graph, node_id, reverse):
    neighbors = sorted(graph.neighbors(node_id), key=lambda edge: graph.label(edge[0]))
    if reverse:
        neighbors.reverse()
    return neighbors


def run_frontier_search(graph, start, goal, descriptor, options):
    """Runs one strategy to a terminal status and returns its History.

    Args:
        graph: Graph to search (never mutated)
        start: start node id
        goal: goal node id
        descriptor: StrategyDescriptor of the strategy being run
        options: SearchOptions
    Returns:
        History whose last snapshot is found, failed or limit_reached
    """
    recorder = HistoryRecorder()
    frontier = [FrontierItem(id=start)]
    visited = set()
    parents = {}
    if descriptor.uses_heuristic:
        validate_heuristics(graph, options.heuristic_mode)
    logger.debug("%s run %s -> %s, options=%s", descriptor.strategy.value, start, goal, options)

    if start == goal:
        recorder.record([], visited, parents, start, Status.FOUND)
        return recorder.freeze(descriptor.strategy, start, goal, options)

    iterations = 0
    while frontier:
        iterations += 1
        if iterations > constants.MAX_ITERATIONS:
            logger.warning("%s stopped after %d iterations without reaching %s",
                           descriptor.strategy.value, constants.MAX_ITERATIONS, goal)
            recorder.record(frontier, visited, parents, None, Status.LIMIT_REACHED)
            break

        if descriptor.priority_ordered:
            # list.sort is stable, so equal priorities keep arrival order
            frontier.sort(key=attrgetter("priority"))

        head = frontier[-1] if descriptor.lifo else frontier[0]
        recorder.record(frontier, visited, parents, head.id)
        current = frontier.pop() if descriptor.lifo else frontier.pop(0)

        if options.suppress_revisits and current.id in visited:
            continue
        visited.add(current.id)

        if descriptor.goal_test_at_pop and current.id == goal:
            recorder.record(frontier, visited, parents, current.id, Status.FOUND)
            break

        found = False
        for neighbor, weight in _sorted_neighbors(graph, current.id, descriptor.lifo):
            new_cost = current.cost + weight
            new_path_length = current.path_length + 1

            if options.suppress_revisits and (
                    neighbor in visited or any(item.id == neighbor for item in frontier)):
                continue

            # the start node has no parent, even when revisits are allowed
            if neighbor != start:
                parents[neighbor] = current.id

            if not descriptor.goal_test_at_pop and neighbor == goal:
                frontier.append(FrontierItem(neighbor, new_cost, new_cost, 0, new_path_length))
                recorder.record(frontier, visited, parents, neighbor, Status.FOUND)
                found = True
                break

            h = heuristic(graph, neighbor, goal, options.heuristic_mode) if descriptor.uses_heuristic else 0
            frontier.append(FrontierItem(neighbor, new_cost, new_cost + h, h, new_path_length))
        if found:
            break

    if not recorder.terminated:
        recorder.record(frontier, visited, parents, None, Status.FAILED)

    history = recorder.freeze(descriptor.strategy, start, goal, options)
    logger.debug("%s finished with %s after %d iterations",
                 descriptor.strategy.value, history.status.value, iterations)
    return history
