"""Exceptions raised before a search run produces any snapshot."""


class SearchError(Exception):
    """Base class for every error raised by the search engine."""


class MalformedGraph(SearchError, ValueError):
    """The graph (or the requested start/goal) does not describe a valid input.

    Raised for edges pointing at unknown nodes, duplicate node ids, negative
    weights, unknown start/goal ids and unreadable graph file lines.
    """


class MissingHeuristic(SearchError, ValueError):
    """Preset heuristic mode was requested but a node has no fixed ``h``."""

    def __init__(self, node_id):
        super().__init__(f"node {node_id} has no preset heuristic value")
        self.node_id = node_id


class MalformedParentMap(SearchError, ValueError):
    """A parent chain is broken or cyclic and cannot yield a path."""
