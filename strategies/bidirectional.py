import logging
from collections import deque

import constants
from history import FrontierItem, HistoryRecorder, Side, Status
from strategies.common import SearchOptions, Strategy

logger = logging.getLogger(__name__)


class _HalfSearch:
    """Frontier, visited set and parent map grown from one end of the search."""
    def __init__(self, root, side):
        self.side = side
        self.frontier = deque([FrontierItem(id=root, side=side)])
        self.visited = {root}
        self.parents = {}

    def expand(self, graph, item):
        for neighbor, weight in sorted(graph.neighbors(item.id), key=lambda edge: graph.label(edge[0])):
            if neighbor in self.visited:
                continue
            self.visited.add(neighbor)
            self.parents[neighbor] = item.id
            cost = item.cost + weight
            self.frontier.append(FrontierItem(neighbor, cost, cost, 0, item.path_length + 1, self.side))


def run_bidirectional_bfs(graph, start, goal, options=None):
    """Bidirectional Breadth-First Search.

    Alternates one pop from the start side and one from the end side per
    iteration and stops when a popped node was already reached by the other
    side. Revisits are always suppressed, whatever the options say.

    Returns:
        History; the found snapshot carries ``intersect`` and the two
        separate parent maps needed to rebuild the path
    """
    options = options or SearchOptions()
    recorder = HistoryRecorder()
    halves = {Side.START: _HalfSearch(start, Side.START), Side.END: _HalfSearch(goal, Side.END)}
    logger.debug("BIBFS run %s -> %s", start, goal)

    def record(current, status, side, intersect=None):
        from_start, from_end = halves[Side.START], halves[Side.END]
        recorder.record(
            list(from_start.frontier) + list(from_end.frontier),
            from_start.visited | from_end.visited,
            {**from_start.parents, **from_end.parents},
            current,
            status,
            active_side=side,
            intersect=intersect,
            parents_start=from_start.parents,
            parents_end=from_end.parents,
        )

    iterations = 0
    while halves[Side.START].frontier and halves[Side.END].frontier:
        iterations += 1
        if iterations > constants.MAX_ITERATIONS:
            logger.warning("BIBFS stopped after %d iterations", constants.MAX_ITERATIONS)
            record(None, Status.LIMIT_REACHED, None)
            break

        for side, other in ((Side.START, Side.END), (Side.END, Side.START)):
            active = halves[side]
            item = active.frontier.popleft()
            record(item.id, Status.EXPLORING, side)
            if item.id in halves[other].visited:
                record(item.id, Status.FOUND, side, intersect=item.id)
                break
            active.expand(graph, item)
        if recorder.terminated:
            break

    if not recorder.terminated:
        record(None, Status.FAILED, None)

    history = recorder.freeze(Strategy.BIDIRECTIONAL_BFS, start, goal, options)
    logger.debug("BIBFS finished with %s after %d iterations", history.status.value, iterations)
    return history
