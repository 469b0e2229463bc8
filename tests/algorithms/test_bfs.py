from flowcut.algorithms.bfs import find_augmenting_path, reachable_from
from flowcut.graph.residual import ResidualGraph
from flowcut.types.dto import AugmentingPath


class TestFindAugmentingPath:
    def test_single_edge(self, single_edge):
        path = find_augmenting_path(ResidualGraph(single_edge), 0, 1)
        assert path is not None
        assert path.vertices() == [0, 1]
        assert path.bottleneck == 5

    def test_diamond_first_path_and_parents(self, diamond):
        """
        Vertex 1 is scanned before vertex 2, so the 0→1→3 branch wins.
        Vertex 2 is discovered but the search stops at the sink.
        """
        path = find_augmenting_path(ResidualGraph(diamond), 0, 3)
        assert path == AugmentingPath(
            source=0, sink=3, parent={1: 0, 2: 0, 3: 1}, bottleneck=2
        )
        assert path.reached == frozenset({0, 1, 2, 3})

    def test_tie_break_prefers_lower_index(self):
        cap = [
            [0, 1, 1, 0],
            [0, 0, 0, 1],
            [0, 0, 0, 1],
            [0, 0, 0, 0],
        ]
        path = find_augmenting_path(ResidualGraph(cap), 0, 3)
        assert path.vertices() == [0, 1, 3]

    def test_fewest_edges_beats_larger_capacity(self):
        """A direct edge of capacity 1 is taken before a 3-hop path of capacity 10."""
        cap = [
            [0, 10, 0, 1],
            [0, 0, 10, 0],
            [0, 0, 0, 10],
            [0, 0, 0, 0],
        ]
        path = find_augmenting_path(ResidualGraph(cap), 0, 3)
        assert path.vertices() == [0, 3]
        assert path.bottleneck == 1

    def test_bottleneck_is_path_minimum(self):
        cap = [
            [0, 7, 0, 0],
            [0, 0, 3, 0],
            [0, 0, 0, 9],
            [0, 0, 0, 0],
        ]
        path = find_augmenting_path(ResidualGraph(cap), 0, 3)
        assert path.bottleneck == 3

    def test_unreachable_sink(self, disconnected_sink):
        assert find_augmenting_path(ResidualGraph(disconnected_sink), 0, 3) is None

    def test_source_equals_sink(self):
        assert find_augmenting_path(ResidualGraph([[4]]), 0, 0) is None

    def test_saturated_edge_is_skipped(self, single_edge):
        graph = ResidualGraph(single_edge)
        graph.augment(find_augmenting_path(graph, 0, 1), 5)
        assert graph.has_edge(0, 1)
        assert find_augmenting_path(graph, 0, 1) is None

    def test_uses_reverse_residual_edge(self, cancellation):
        """After s→a→b→t is saturated, the only path runs b→a against the flow."""
        graph = ResidualGraph(cancellation)
        first = find_augmenting_path(graph, 0, 7)
        assert first.vertices() == [0, 1, 2, 7]
        graph.augment(first, first.bottleneck)

        second = find_augmenting_path(graph, 0, 7)
        assert second is not None
        assert second.vertices() == [0, 5, 6, 2, 1, 3, 4, 7]
        assert (2, 1) in second.edges()
        assert second.bottleneck == 1

    def test_does_not_modify_graph(self, diamond):
        graph = ResidualGraph(diamond)
        find_augmenting_path(graph, 0, 3)
        assert not graph.flow.any()


class TestReachableFrom:
    def test_full_sweep_without_early_exit(self, diamond):
        parent = reachable_from(ResidualGraph(diamond), 0)
        assert parent == {1: 0, 2: 0, 3: 1}

    def test_source_has_no_parent(self, disconnected_sink):
        parent = reachable_from(ResidualGraph(disconnected_sink), 0)
        assert 0 not in parent
        assert set(parent) == {1, 2}

    def test_isolated_source(self):
        assert reachable_from(ResidualGraph([[0, 0], [3, 0]]), 0) == {}
