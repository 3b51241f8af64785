import pytest

from wordladder.graph import Graph


def _chain():
    graph = Graph()
    for node in "abcde":
        graph.add_node(node)
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("c", "d")
    return graph


def test_add_node_reports_duplicates():
    graph = Graph()
    assert graph.add_node("x") is True
    assert graph.add_node("x") is False
    assert len(graph) == 1


def test_contains():
    graph = Graph()
    graph.add_node("x")
    assert "x" in graph
    assert "y" not in graph


def test_add_edge_requires_existing_nodes():
    graph = Graph()
    graph.add_node("a")
    with pytest.raises(ValueError):
        graph.add_edge("a", "missing")
    with pytest.raises(ValueError):
        graph.add_edge("missing", "a")


def test_edges_are_symmetric():
    graph = _chain()
    assert graph.neighbours("b") == {"a", "c"}
    assert graph.neighbours("a") == {"b"}
    assert graph.neighbours("e") == set()


def test_neighbours_of_unknown_node_raises():
    with pytest.raises(ValueError):
        Graph().neighbours("nope")


def test_neighbours_returns_a_copy():
    graph = _chain()
    graph.neighbours("a").add("z")
    assert graph.neighbours("a") == {"b"}


def test_distances_invariants():
    graph = _chain()
    dist, prev = graph.distances("a")
    assert dist["a"] == 0
    assert "a" not in prev
    assert "e" not in dist
    assert set(prev) == set(dist) - {"a"}
    for node, parent in prev.items():
        assert dist[node] == dist[parent] + 1
        assert parent in graph.neighbours(node)


def test_distances_value_along_chain():
    dist, _ = _chain().distances("a")
    assert dist["d"] == 3


def test_distances_follow_shortest_route():
    graph = _chain()
    graph.add_edge("a", "d")
    dist, prev = graph.distances("a")
    assert dist["d"] == 1
    assert prev["d"] == "a"


def test_distances_unknown_source_raises():
    with pytest.raises(ValueError):
        _chain().distances("zzz")


def test_integer_nodes():
    graph = Graph()
    for node in range(4):
        graph.add_node(node)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    dist, prev = graph.distances(2)
    assert prev[0] == 1
    assert 3 not in dist