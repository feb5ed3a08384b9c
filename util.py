from errors import MalformedGraph


class Node:
    """Represents a node in the 2D graph."""
    def __init__(self, node_id, x, y, label=None, h=None):
        self.id = int(node_id)
        self.x = float(x)
        self.y = float(y)
        self.label = str(label) if label is not None else str(self.id)
        self.h = float(h) if h is not None else None

    @classmethod
    def from_mapping(cls, data):
        """Builds a Node from a ``{id, x, y, label, h}`` mapping."""
        return cls(data["id"], data["x"], data["y"], data.get("label"), data.get("h"))

    def __repr__(self):
        return f"Node {self.id} {self.label}: ({self.x},{self.y})"


class Edge:
    """Undirected weighted edge between two node ids."""
    def __init__(self, source, target, weight):
        self.source = int(source)
        self.target = int(target)
        self.weight = float(weight)

    @classmethod
    def from_mapping(cls, data):
        return cls(data["source"], data["target"], data["weight"])

    def __repr__(self):
        return f"Edge ({self.source},{self.target}): {self.weight}"


def build_adjacency(nodes, edges):
    """Builds the symmetric adjacency structure for a node/edge list.

    Args:
        nodes: iterable of Node objects
        edges: iterable of Edge objects
    Returns:
        {node_id: [(neighbor_id, weight), ...]} with every edge listed in both
        directions, in edge order
    Raises:
        MalformedGraph: duplicate node id, unknown endpoint or negative weight
    """
    adjacency = {}
    for node in nodes:
        if node.id in adjacency:
            raise MalformedGraph(f"duplicate node id {node.id}")
        adjacency[node.id] = []

    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in adjacency:
                raise MalformedGraph(f"{edge!r} references unknown node {endpoint}")
        if edge.weight < 0:
            raise MalformedGraph(f"{edge!r} has a negative weight")
        adjacency[edge.source].append((edge.target, edge.weight))
        adjacency[edge.target].append((edge.source, edge.weight))
    return adjacency


class Graph:
    """Represents the complete undirected graph. Read-only once built."""
    def __init__(self, nodes=(), edges=()):
        try:
            nodes = [n if isinstance(n, Node) else Node.from_mapping(n) for n in nodes]
            edges = [e if isinstance(e, Edge) else Edge.from_mapping(e) for e in edges]
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedGraph(f"invalid node or edge entry: {e!r}") from e
        self.adjacency = build_adjacency(nodes, edges)   # {node_id: [(to_node_id, cost), ...]}
        self.nodes = {n.id: n for n in nodes}             # {node_id: Node_object}
        self.edges = tuple(edges)

    @classmethod
    def from_dict(cls, data):
        """Builds a Graph from a ``{"nodes": [...], "edges": [...]}`` mapping."""
        return cls(data.get("nodes", ()), data.get("edges", ()))

    @classmethod
    def coerce(cls, graph):
        """Returns graph unchanged if it is a Graph, else builds one from the mapping."""
        return graph if isinstance(graph, cls) else cls.from_dict(graph)

    @classmethod
    def from_frames(cls, nodes_df, edges_df):
        """Builds a Graph from pandas DataFrames.

        Args:
            nodes_df: DataFrame with columns id, x, y, label and optionally h
            edges_df: DataFrame with columns source, target, weight
        """
        nodes = []
        for row in nodes_df.to_dict("records"):
            h = row.get("h")
            # pandas fills absent optional values with NaN
            if h is not None and h != h:
                h = None
            nodes.append(Node(row["id"], row["x"], row["y"], row.get("label"), h))
        edges = [Edge(row["source"], row["target"], row["weight"])
                 for row in edges_df.to_dict("records")]
        return cls(nodes, edges)

    def __contains__(self, node_id):
        return node_id in self.nodes

    def __len__(self):
        return len(self.nodes)

    def require(self, *node_ids):
        """Raises MalformedGraph unless every id names a node of this graph."""
        for node_id in node_ids:
            if node_id not in self:
                raise MalformedGraph(f"node {node_id} is not part of the graph")

    def label(self, node_id):
        return self.nodes[node_id].label

    def neighbors(self, node_id):
        return self.adjacency.get(node_id, [])

    def get_coordinates(self, node_id):
        """Returns the (x, y) coordinates of a node."""
        node = self.nodes.get(node_id)
        return (node.x, node.y) if node else None

    def edge_weight(self, from_node, to_node):
        """Weight of the first edge joining two nodes, or None."""
        for neighbor, cost in self.adjacency.get(from_node, []):
            if neighbor == to_node:
                return cost
        return None

    def path_cost(self, path):
        """Calculate total cost of edges in the given path."""
        total = 0
        for i in range(len(path) - 1):
            edge_cost = self.edge_weight(path[i], path[i + 1])
            if edge_cost is None:
                return None  # Edge not found
            total += edge_cost
        return total


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
