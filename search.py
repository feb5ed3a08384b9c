import argparse
import logging
import sys
import time
import tracemalloc
from pathlib import Path

import psutil

import constants
from file_reader import load_graph
from oracle import ground_truth
from stats import history_frame, summarize
from strategies import RUNNERS, HeuristicMode, SearchOptions, Strategy
from strategies.heuristics import validate_heuristics
from util import FormatBytes, Graph

logger = logging.getLogger(__name__)


def search(graph, start_id, end_id, strategy, options=None):
    """Run one strategy from start_id to end_id and return its History.

    Args:
        graph: Graph, or a {"nodes": [...], "edges": [...]} mapping
        start_id: start node id
        end_id: goal node id
        strategy: Strategy, or a name such as "BFS", "AS" or "BIBFS"
        options: SearchOptions (defaults: suppress revisits, euclidean heuristic)

    Raises:
        MalformedGraph: the graph is invalid or start/end are not in it
        MissingHeuristic: preset heuristics requested and a node has no ``h``
    """
    graph = Graph.coerce(graph)
    strategy = Strategy.parse(strategy)
    options = options or SearchOptions()
    graph.require(start_id, end_id)
    validate_heuristics(graph, options.heuristic_mode)
    return RUNNERS[strategy](graph, start_id, end_id, options)


# --- Command line entry point ---

def _execute_with_metrics(run_fn):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn()
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    return result, dt, peak, proc.memory_info().rss


def _resolve_graph_file(filename):
    """Falls back to GRAPH_FOLDER for relative names missing from the working directory."""
    path = Path(filename)
    if not path.is_absolute() and not path.exists() and (constants.GRAPH_FOLDER / path).exists():
        return constants.GRAPH_FOLDER / path
    return path


def _label_path(graph, path):
    return " -> ".join(graph.label(n) for n in path)


def main(filename, method, options, metrics_mode="none", show_truth=False, show_trace=False):
    """Reads a graph file, runs the requested method and prints the outcome.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the result
    """
    graph, start, goal = load_graph(_resolve_graph_file(filename))
    logger.info("Loaded %s: %d nodes, %d edges", filename, len(graph), len(graph.edges))
    if start is None or goal is None:
        raise SystemExit(f"{filename}: the [META] section needs START and GOAL lines")

    strategy = Strategy.parse(method)
    history, runtime_s, peak_bytes, rss_after = _execute_with_metrics(
        lambda: search(graph, start, goal, strategy, options))
    truth = ground_truth(graph, start, goal) if show_truth else None
    result = summarize(graph, history, truth)

    print(f"{filename} {strategy.value}")
    print(f"Status:{result.status.value}")
    print(f"Snapshots recorded:{result.steps}")
    print(f"Number of Nodes visited:{result.explored}")
    if result.found:
        print(f"Goal node reached:{graph.label(goal)}")
        print(_label_path(graph, result.path))
        print(f"Path length (edges):{result.path_edges}")
        print(f"Total path cost:{result.path_cost:g}")
    if truth is not None:
        print(f"Ground truth: min_edges={truth.min_edges} min_cost={truth.min_cost:g}")
        if result.found:
            print(f"Shortest path:{'yes' if result.is_shortest else 'no'}")
            print(f"Least cost:{'yes' if result.is_cheapest else 'no'}")
    if show_trace:
        print(history_frame(history, graph).to_string())

    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={strategy.value} snapshots={result.steps} "
            f"nodes_expanded={result.explored} frontier_max={result.frontier_max} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)} "
            f"rss_now={FormatBytes(rss_after)}"
        )
        print(metrics_line, file=sys.stdout if metrics_mode == "stdout" else sys.stderr)
    return history


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Run a traced graph search on a graph file")
    parser.add_argument("filename", help="graph file with [NODES], [EDGES] and [META] sections; "
                                         "relative names also resolve against the graphs folder")
    parser.add_argument("method", nargs="?", default=constants.DEFAULT_STRATEGY,
                        help="BFS, DFS, DIJKSTRA, AS or BIBFS")
    parser.add_argument("--allow-revisits", action="store_true",
                        help="disable duplicate suppression")
    parser.add_argument("--heuristic", default=HeuristicMode.EUCLIDEAN.value,
                        choices=[mode.value for mode in HeuristicMode])
    parser.add_argument("--truth", action="store_true", help="compare against the ground truth")
    parser.add_argument("--trace", action="store_true", help="print every recorded snapshot")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const",
                         const="stderr", default="none")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout")
    args = parser.parse_args(argv)

    logging.basicConfig(level=constants.LOG_LEVEL, format=constants.LOG_FORMAT)
    options = SearchOptions(suppress_revisits=not args.allow_revisits, heuristic_mode=args.heuristic)
    try:
        main(args.filename, args.method, options, args.metrics_mode, args.truth, args.trace)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
