"""Sample capacity matrices shared by the algorithm tests.

Vertex 0 is always the source and the last vertex the sink.
"""

import pytest


@pytest.fixture
def single_edge():
    #  0 ──5──► 1
    return [
        [0, 5],
        [0, 0],
    ]


@pytest.fixture
def diamond():
    #        ┌──3──► 1 ──2──┐
    #  0 ───┤               ├──► 3
    #        └──2──► 2 ──3──┘
    return [
        [0, 3, 2, 0],
        [0, 0, 0, 2],
        [0, 0, 0, 3],
        [0, 0, 0, 0],
    ]


@pytest.fixture
def disconnected_sink():
    #  0 ──4──► 1 ──3──► 2        3
    return [
        [0, 4, 0, 0],
        [0, 0, 3, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]


@pytest.fixture
def parallel_paths():
    # Three disjoint 0 → k → 4 paths, capacity 4 on every edge.
    return [
        [0, 4, 4, 4, 0],
        [0, 0, 0, 0, 4],
        [0, 0, 0, 0, 4],
        [0, 0, 0, 0, 4],
        [0, 0, 0, 0, 0],
    ]


@pytest.fixture
def cancellation():
    # The shortest path s→a→b→t blocks both longer routes
    # s→a→p→q→t and s→r→w→b→t; reaching the max flow of 2 requires
    # cancelling the flow on a→b.
    #
    # Indices: s=0, a=1, b=2, p=3, q=4, r=5, w=6, t=7
    cap = [[0] * 8 for _ in range(8)]
    for u, v in [
        (0, 1),
        (1, 2),
        (2, 7),
        (1, 3),
        (3, 4),
        (4, 7),
        (0, 5),
        (5, 6),
        (6, 2),
    ]:
        cap[u][v] = 1
    return cap


@pytest.fixture
def clrs():
    # Textbook example with max flow 23.
    # Indices: s=0, v1=1, v2=2, v3=3, v4=4, t=5
    cap = [[0] * 6 for _ in range(6)]
    for u, v, c in [
        (0, 1, 16),
        (0, 2, 13),
        (2, 1, 4),
        (1, 3, 12),
        (3, 2, 9),
        (2, 4, 14),
        (4, 3, 7),
        (3, 5, 20),
        (4, 5, 4),
    ]:
        cap[u][v] = c
    return cap


@pytest.fixture
def bidirectional():
    # 0 ⇄ 1 with capacities 3 and 2, then 1 ──4──► 2
    return [
        [0, 3, 0],
        [2, 0, 4],
        [0, 0, 0],
    ]
