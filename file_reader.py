import pandas as pd

from errors import MalformedGraph
from util import Graph

NODE_COLUMNS = ["id", "x", "y", "label", "h"]
EDGE_COLUMNS = ["source", "target", "weight"]


def split_fields(line, min_fields, max_fields=None):
    parts = [p.strip() for p in line.split(",")]
    if len(parts) < min_fields or (max_fields is not None and len(parts) > max_fields):
        raise ValueError(f"Line '{line}' parsed into the wrong number of fields: {parts}")
    return parts


def parse_graph_file(path):
    """Parses a graph file

    Args:
        path (string): Filepath to the graph txt file

    Returns:
        nodes: Pandas DataFrame of nodes (columns: id, x, y, label, h)
        edges: Pandas DataFrame of edges (columns: source, target, weight)
        start: start node id, or None when the file has no START line
        goal: goal node id, or None when the file has no GOAL line
    """
    section = None
    nodes = []
    edges = []
    start = None
    goal = None

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for number, raw in enumerate(f, start=1):
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            try:
                if section == "[NODES]":
                    p = split_fields(line, 4, 5)
                    h = float(p[4]) if len(p) == 5 and p[4] else None
                    nodes.append({"id": int(p[0]), "x": float(p[1]), "y": float(p[2]),
                                  "label": p[3], "h": h})

                elif section == "[EDGES]":
                    p = split_fields(line, 3, 3)
                    edges.append({"source": int(p[0]), "target": int(p[1]), "weight": float(p[2])})

                elif section == "[META]":
                    p = split_fields(line, 2)
                    key = p[0].upper()
                    if key == "START":
                        start = int(p[1])
                    elif key == "GOAL":
                        goal = int(p[1])

                else:
                    raise ValueError(f"Line '{line}' is outside any known section")
            except ValueError as e:
                raise MalformedGraph(f"{path}:{number}: {e}") from e

    nodes_df = pd.DataFrame(nodes, columns=NODE_COLUMNS)
    edges_df = pd.DataFrame(edges, columns=EDGE_COLUMNS)
    return nodes_df, edges_df, start, goal


def load_graph(path):
    """Reads a graph file straight into a Graph.

    Returns:
        (graph, start, goal)
    """
    nodes_df, edges_df, start, goal = parse_graph_file(path)
    return Graph.from_frames(nodes_df, edges_df), start, goal
