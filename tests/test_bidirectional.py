"""
Tests for bidirectional breadth-first search.
"""

import pytest

import constants
from history import Side, Status
from pathing import reconstruct, reconstruct_bidirectional, snapshot_path
from search import search
from strategies import SearchOptions, Strategy


def run(graph, start, goal, options=None):
    return search(graph, start, goal, Strategy.BIDIRECTIONAL_BFS, options)


class TestBidirectional:

    def test_line_meets_in_the_middle(self, line):
        history = run(line, 0, 4)
        assert [s.current for s in history] == [0, 4, 1, 3, 2, 2]
        assert [s.active_side for s in history] == [Side.START, Side.END] * 2 + [Side.START] * 2
        assert history.final.status is Status.FOUND
        assert history.final.intersect == 2
        assert snapshot_path(history) == [0, 1, 2, 3, 4]

    def test_grid(self, grid):
        history = run(grid, 0, 8)
        found = history.final
        assert len(history) == 8
        assert found.intersect == 2
        assert dict(found.parents_start)[2] == 1
        assert dict(found.parents_end)[2] == 5
        assert snapshot_path(history) == [0, 1, 2, 5, 8]

    def test_snapshot_shows_both_sides(self, grid):
        history = run(grid, 0, 8)
        # second iteration, B just dequeued: D left on the start side, F and H
        # queued from I on the end side
        snapshot = history[2]
        assert snapshot.current == 1
        assert snapshot.frontier_ids == [3, 5, 7]
        assert [item.side for item in snapshot.frontier] == [Side.START, Side.END, Side.END]
        assert snapshot.visited == frozenset({0, 1, 3, 5, 7, 8})

    def test_parent_maps_stay_separate(self, grid):
        found = run(grid, 0, 8).final
        assert set(found.parents_start).isdisjoint({8})
        assert set(found.parents_end).isdisjoint({0})
        assert dict(found.parents) == {**found.parents_start, **found.parents_end}

    def test_random_graphs_yield_simple_paths(self, random_graphs):
        for graph in random_graphs:
            start, goal = 0, max(graph.nodes)
            history = run(graph, start, goal)
            found = history.final
            assert found.status is Status.FOUND
            path = snapshot_path(history)
            assert path[0] == start and path[-1] == goal
            assert len(set(path)) == len(path)
            assert all(graph.edge_weight(a, b) is not None for a, b in zip(path, path[1:]))
            start_depth = len(reconstruct(found.parents_start, start, found.intersect)) - 1
            end_depth = len(reconstruct(found.parents_end, goal, found.intersect)) - 1
            assert len(path) - 1 == start_depth + end_depth

    def test_disconnected_goal_fails(self, triangle_with_island):
        history = run(triangle_with_island, 0, 3)
        assert [s.status for s in history] == [Status.EXPLORING, Status.EXPLORING, Status.FAILED]

    def test_revisit_option_has_no_effect(self, triangle_with_island):
        history = run(triangle_with_island, 0, 3, SearchOptions(suppress_revisits=False))
        assert history.status is Status.FAILED
        assert len(history) < constants.MAX_ITERATIONS

    def test_start_equals_goal(self, grid):
        history = run(grid, 4, 4)
        assert history.final.status is Status.FOUND
        assert history.final.intersect == 4
        assert snapshot_path(history) == [4]

    def test_idempotent(self, grid):
        assert run(grid, 0, 8) == run(grid, 0, 8)

    def test_iteration_limit(self, line, monkeypatch):
        monkeypatch.setattr(constants, "MAX_ITERATIONS", 1)
        history = run(line, 0, 4)
        assert [s.status for s in history] == [Status.EXPLORING, Status.EXPLORING, Status.LIMIT_REACHED]
        assert history.final.current is None
        assert history.final.active_side is None
        assert snapshot_path(history) == []


class TestReconstructBidirectional:

    def test_joins_halves(self):
        parents_start = {1: 0, 2: 1}
        parents_end = {3: 4, 2: 3}
        assert reconstruct_bidirectional(parents_start, parents_end, 0, 4, 2) == [0, 1, 2, 3, 4]

    def test_merged_map_would_lose_the_end_half(self):
        parents_start = {1: 0, 2: 1}
        parents_end = {3: 4, 2: 3}
        merged = {**parents_start, **parents_end}
        # the merged map sends 2 back towards the goal, so it cannot rebuild the start half
        with pytest.raises(ValueError):
            reconstruct(merged, 0, 2)
        assert reconstruct_bidirectional(parents_start, parents_end, 0, 4, 2)[0] == 0

