"""
Per-step statistics for a recorded run.

Mirrors what a playback sidebar shows at a given step: what is being
explored, how big the frontier has been, and whether the path found so far
matches the ground truth.
"""

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from history import Status
from pathing import current_trace, snapshot_path


@dataclass(frozen=True)
class RunStats:
    step: int
    steps: int
    status: Status
    current: Optional[int]
    explored: int
    frontier_size: int
    frontier_avg: float
    frontier_max: int
    found: bool
    path: List[int]
    path_edges: int
    path_cost: float
    is_shortest: Optional[bool] = None
    is_cheapest: Optional[bool] = None


def summarize(graph, history, truth=None, step=None):
    """Statistics of ``history`` as of snapshot ``step`` (default: the last).

    Args:
        graph: Graph the run was made on, used to price the path
        history: History of the run
        truth: optional GroundTruth to judge optimality against
        step: snapshot index; negative indices count from the end
    Returns:
        RunStats
    """
    if step is None:
        step = len(history) - 1
    elif step < 0:
        step += len(history)
    if not 0 <= step < len(history):
        raise IndexError(f"step {step} outside a history of {len(history)} snapshots")

    snapshot = history[step]
    sizes = [len(s.frontier) for s in history.snapshots[:step + 1]]
    found = snapshot.status is Status.FOUND
    path = snapshot_path(history, step)

    is_shortest = is_cheapest = None
    path_cost = graph.path_cost(path) if path else 0
    if found and truth is not None:
        is_shortest = len(path) - 1 <= truth.min_edges
        is_cheapest = path_cost <= truth.min_cost

    return RunStats(
        step=step,
        steps=len(history),
        status=snapshot.status,
        current=snapshot.current,
        explored=len(snapshot.visited),
        frontier_size=len(snapshot.frontier),
        frontier_avg=sum(sizes) / len(sizes),
        frontier_max=max(sizes),
        found=found,
        path=path,
        path_edges=max(len(path) - 1, 0),
        path_cost=path_cost,
        is_shortest=is_shortest,
        is_cheapest=is_cheapest,
    )


def history_frame(history, graph=None):
    """Tabulates a run, one row per snapshot.

    Columns: step, status, current, frontier, frontier_size, visited_size,
    active_side and trace (the partial path to the current node). When a
    graph is given, node ids in current/frontier/trace are shown as labels.
    """
    name = graph.label if graph is not None else (lambda node_id: node_id)
    limit = len(graph) if graph is not None else None
    rows = []
    for index, snapshot in enumerate(history):
        trace_limit = limit if limit is not None else len(snapshot.parents) + 1
        trace = current_trace(snapshot.parents, history.start, snapshot.current, trace_limit)
        rows.append({
            "step": index,
            "status": snapshot.status.value,
            "current": name(snapshot.current) if snapshot.current is not None else None,
            "frontier": [name(item.id) for item in snapshot.frontier],
            "frontier_size": len(snapshot.frontier),
            "visited_size": len(snapshot.visited),
            "active_side": snapshot.active_side.value if snapshot.active_side else None,
            "trace": [name(node_id) for node_id in trace],
        })
    return pd.DataFrame(rows, columns=["step", "status", "current", "frontier", "frontier_size",
                                       "visited_size", "active_side", "trace"]).set_index("step")
