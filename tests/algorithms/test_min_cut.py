import numpy as np
import pytest

from flowcut.algorithms.max_flow import calc_max_flow
from flowcut.algorithms.min_cut import cut_capacity, cut_edges, find_cut_source_side
from flowcut.graph.residual import ResidualGraph
from flowcut.types.base import FlowInvariantError


class TestFindCutSourceSide:
    def test_after_max_flow(self, diamond):
        _, graph = calc_max_flow(diamond, return_graph=True)
        assert find_cut_source_side(graph, 0, 3) == frozenset({0, 1})

    def test_saturated_source_edges(self, single_edge):
        _, graph = calc_max_flow(single_edge, return_graph=True)
        assert find_cut_source_side(graph, 0, 1) == frozenset({0})

    def test_sink_reachable_is_an_invariant_failure(self, diamond):
        """Without any flow pushed the sink is reachable; that is never a valid cut."""
        with pytest.raises(FlowInvariantError, match="not maximal"):
            find_cut_source_side(ResidualGraph(diamond), 0, 3)

    def test_single_vertex(self):
        assert find_cut_source_side(ResidualGraph([[0]]), 0, 0) == frozenset({0})

    def test_empty_graph(self):
        assert find_cut_source_side(ResidualGraph([]), 0, -1) == frozenset()


class TestCutMeasures:
    def test_cut_edges_sorted_and_positive_only(self, diamond):
        cap = np.array(diamond)
        assert cut_edges(cap, {0, 1}) == [(0, 2), (1, 3)]
        assert cut_edges(cap, {0}) == [(0, 1), (0, 2)]

    def test_cut_capacity(self, clrs):
        cap = np.array(clrs)
        assert cut_capacity(cap, {0}) == 29
        assert cut_capacity(cap, {0, 1, 2, 4}) == 23

    def test_backward_edges_not_counted(self):
        cap = np.array(
            [
                [0, 1, 0],
                [5, 0, 2],
                [0, 0, 0],
            ]
        )
        assert cut_capacity(cap, {0}) == 1
        assert cut_edges(cap, {0}) == [(0, 1)]

    def test_empty_side(self, diamond):
        assert cut_capacity(np.array(diamond), set()) == 0
