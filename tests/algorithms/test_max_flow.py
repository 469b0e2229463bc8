import networkx as nx
import numpy as np
import pytest
from networkx.algorithms.flow import edmonds_karp

from flowcut.algorithms.max_flow import calc_max_flow, saturated_edges, solve
from flowcut.algorithms.min_cut import cut_capacity
from flowcut.config import FlowConfig
from flowcut.graph.residual import ResidualGraph
from flowcut.types.base import InvalidCapacityError
from flowcut.types.dto import MaxFlowResult


def _random_capacity(seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    size = int(rng.integers(2, 9))
    cap = rng.integers(1, 10, size=(size, size))
    cap[rng.random((size, size)) < 0.5] = 0
    np.fill_diagonal(cap, 0)
    return cap


def _networkx_max_flow(cap: np.ndarray) -> int:
    G = nx.DiGraph()
    G.add_nodes_from(range(cap.shape[0]))
    for u, v in np.argwhere(cap > 0).tolist():
        G.add_edge(u, v, capacity=int(cap[u, v]))
    return nx.maximum_flow_value(G, 0, cap.shape[0] - 1, flow_func=edmonds_karp)


class TestMaxFlowBasic:
    """
    Tests that directly verify specific flow values on known small graphs.
    """

    def test_single_edge(self, single_edge):
        assert calc_max_flow(single_edge) == 5

    def test_diamond(self, diamond):
        """
        Each branch is limited by its weaker edge: 2 via vertex 1 and 2 via vertex 2.
        """
        assert calc_max_flow(diamond) == 4

    def test_disconnected_sink(self, disconnected_sink):
        assert calc_max_flow(disconnected_sink) == 0

    def test_parallel_paths(self, parallel_paths):
        total, result = calc_max_flow(parallel_paths, return_summary=True)
        assert total == 12
        assert result.augmentations == 3

    def test_cancellation_reaches_true_maximum(self, cancellation):
        total, result = calc_max_flow(cancellation, return_summary=True)
        assert total == 2
        assert result.augmentations == 2
        # Flow on a→b was cancelled by the second augmentation
        assert result.flow[1, 2] == 0

    def test_clrs(self, clrs):
        assert calc_max_flow(clrs) == 23

    def test_bidirectional_edges(self, bidirectional):
        assert calc_max_flow(bidirectional) == 3

    def test_numpy_input(self, diamond):
        assert calc_max_flow(np.array(diamond)) == 4


class TestMaxFlowReturnValues:
    def test_scalar_by_default(self, diamond):
        total = calc_max_flow(diamond)
        assert isinstance(total, int)

    def test_return_summary(self, diamond):
        total, result = calc_max_flow(diamond, return_summary=True)
        assert isinstance(result, MaxFlowResult)
        assert result.total_flow == total == 4
        assert result.source_side == frozenset({0, 1})
        assert result.min_cut_edges == ((0, 2), (1, 3))
        assert result.cut_capacity == 4
        assert result.augmentations == 2

    def test_return_graph(self, diamond):
        total, graph = calc_max_flow(diamond, return_graph=True)
        assert total == 4
        assert isinstance(graph, ResidualGraph)
        assert graph.residual(0, 2) == 0
        assert graph.residual(0, 1) == 1

    def test_return_both(self, diamond):
        ret = calc_max_flow(diamond, return_summary=True, return_graph=True)
        assert len(ret) == 3
        total, result, graph = ret
        assert total == result.total_flow == 4
        np.testing.assert_array_equal(result.flow, graph.flow)

    def test_summary_flow_is_a_snapshot(self, diamond):
        _, result, graph = calc_max_flow(
            diamond, return_summary=True, return_graph=True
        )
        graph.reset_flow()
        assert result.flow[0, 1] == 2

    def test_diamond_flow_matrix(self, diamond):
        result = solve(diamond)
        expected = np.array(
            [
                [0, 2, 2, 0],
                [-2, 0, 0, 2],
                [-2, 0, 0, 2],
                [0, -2, -2, 0],
            ]
        )
        np.testing.assert_array_equal(result.flow, expected)

    def test_solve_matches_calc_max_flow(self, clrs):
        result = solve(clrs)
        assert result.total_flow == calc_max_flow(clrs)
        assert result.source_side == frozenset({0, 1, 2, 4})
        assert result.source_side_labels() == [1, 2, 3, 5]

    def test_config_without_checks(self, clrs):
        cfg = FlowConfig(check_invariants=False)
        assert calc_max_flow(clrs, config=cfg) == 23
        assert solve(clrs, config=cfg).cut_capacity == 23


class TestMaxFlowInput:
    def test_input_not_modified(self, diamond):
        original = [row[:] for row in diamond]
        calc_max_flow(diamond)
        assert diamond == original

    def test_numpy_input_not_modified(self, diamond):
        arr = np.array(diamond)
        calc_max_flow(arr)
        np.testing.assert_array_equal(arr, np.array(diamond))
        assert arr.flags.writeable

    def test_negative_capacity_rejected(self):
        with pytest.raises(InvalidCapacityError, match="non-negative"):
            calc_max_flow([[0, -1], [0, 0]])

    def test_non_square_rejected(self):
        with pytest.raises(InvalidCapacityError, match="square"):
            calc_max_flow([[0, 1, 2], [0, 0, 0]])


class TestSaturatedEdges:
    def test_diamond(self, diamond):
        assert saturated_edges(diamond) == [(0, 2), (1, 3)]

    def test_no_flow(self, disconnected_sink):
        assert saturated_edges(disconnected_sink) == []

    def test_cancelled_edge_not_saturated(self, cancellation):
        assert (1, 2) not in saturated_edges(cancellation)


class TestMaxFlowProperties:
    @pytest.mark.parametrize("seed", range(25))
    def test_matches_networkx(self, seed):
        cap = _random_capacity(seed)
        assert calc_max_flow(cap) == _networkx_max_flow(cap)

    @pytest.mark.parametrize("seed", range(25))
    def test_duality_and_flow_invariants(self, seed):
        cap = _random_capacity(seed)
        result = solve(cap)
        flow = result.flow
        sink = cap.shape[0] - 1

        assert cut_capacity(cap, result.source_side) == result.total_flow
        assert 0 in result.source_side
        assert sink not in result.source_side
        np.testing.assert_array_equal(flow, -flow.T)
        assert np.all(flow[cap > 0] <= cap[cap > 0])
        net = flow.sum(axis=1)
        assert all(net[v] == 0 for v in range(1, sink))
        assert net[0] == result.total_flow == -net[sink]

    def test_min_cut_edges_are_saturated(self, clrs):
        result = solve(clrs)
        for u, v in result.min_cut_edges:
            assert result.flow[u, v] == clrs[u][v]

    def test_repeated_runs_agree(self, clrs):
        first = solve(clrs)
        second = solve(clrs)
        assert first.total_flow == second.total_flow
        np.testing.assert_array_equal(first.flow, second.flow)
        assert first.source_side == second.source_side
