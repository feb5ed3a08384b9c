"""
Path reconstruction from recorded parent maps.
"""

from errors import MalformedParentMap
from history import Status
from strategies.common import Strategy


def _walk(parents, start, target, limit):
    """Yields target, parents[target], ... until start, at most ``limit`` nodes."""
    current = target
    for _ in range(limit):
        yield current
        if current == start:
            return
        if current not in parents:
            return
        current = parents[current]


def reconstruct(parents, start, target, limit=None):
    """Rebuilds the start-to-target path from a parent map.

    Args:
        parents: child -> parent mapping recorded by a run
        start: node the chain must end at
        target: node the walk begins at
        limit: maximum path length in nodes; a well-formed chain never
            exceeds len(parents) + 1, which is the default
    Returns:
        list of node ids from start to target
    Raises:
        MalformedParentMap: the chain is broken or longer than the limit
    """
    if limit is None:
        limit = len(parents) + 1
    path = list(_walk(parents, start, target, limit))
    if not path or path[-1] != start:
        raise MalformedParentMap(f"no parent chain from {target} back to {start}")
    path.reverse()
    return path


def reconstruct_bidirectional(parents_start, parents_end, start, goal, intersect):
    """Joins the start->intersect and intersect->goal halves of a bidirectional run."""
    head = reconstruct(parents_start, start, intersect)
    tail = reconstruct(parents_end, goal, intersect)
    tail.reverse()
    return head + tail[1:]


def current_trace(parents, start, current, limit):
    """Partial path from start to the node under inspection.

    Unlike reconstruct this never raises: with revisits allowed a parent map
    may contain cycles, and the walk is simply cut at ``limit`` nodes.
    """
    if current is None:
        return []
    trace = list(_walk(parents, start, current, limit))
    trace.reverse()
    return trace


def snapshot_path(history, index=-1):
    """Path found by a run, as of the snapshot at ``index``.

    Returns an empty list unless that snapshot has status found.
    """
    snapshot = history[index]
    if snapshot.status is not Status.FOUND:
        return []
    if history.strategy is Strategy.BIDIRECTIONAL_BFS:
        return reconstruct_bidirectional(snapshot.parents_start, snapshot.parents_end,
                                         history.start, history.goal, snapshot.intersect)
    return reconstruct(snapshot.parents, history.start, history.goal)
