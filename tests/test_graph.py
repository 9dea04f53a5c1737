import numpy as np
import pytest

from symdyn.graph import (
    AdjacencyListGraph,
    Edge,
    Graph,
    MatrixGraph,
    Node,
    UnweightedMatrixGraph,
)


def test_matrix_graph_constructor():
    graph = MatrixGraph()
    assert len(graph) == 0
    assert graph.is_empty()

    graph2 = MatrixGraph(3)
    assert len(graph2) == 3
    assert not graph2.is_empty()
    assert np.array_equal(graph2.adjacency_matrix, np.zeros((3, 3)))
    assert graph2.label_matrix == [[(), (), ()], [(), (), ()], [(), (), ()]]


def test_matrix_graph_vertex_edge_adding():
    graph = MatrixGraph(2)
    new_node = graph.add_node((0,))
    assert new_node == 2
    assert graph.node_label(2) == (0,)

    graph.add_edge(0, 1, 1.0, [0])
    graph.add_edge(1, 2, 2.0, [0])
    graph.add_edge(2, 0, 3.0, [0])

    assert graph.edge_exists(0, 1)
    assert graph.edge_exists(1, 2)
    assert graph.edge_exists(2, 0)
    assert not graph.edge_exists(1, 0)

    assert graph.edge_weight(0, 1) == 1.0
    assert graph.edge_weight(1, 2) == 2.0
    assert graph.edge_weight(2, 0) == 3.0

    assert graph.edge_label(0, 1) == (0,)
    assert graph.edge_label(1, 2) == (0,)
    assert graph.edge_label(2, 0) == (0,)

    expected = np.zeros((3, 3))
    expected[0, 1] = 1
    expected[1, 2] = 2
    expected[2, 0] = 3
    assert np.array_equal(graph.adjacency_matrix, expected)
    assert graph.label_matrix == [[(), (0,), ()], [(), (), (0,)], [(0,), (), ()]]


def test_matrix_graph_edge_modification():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 1.0, [0])
    graph.set_edge_weight(0, 1, 2.0)
    graph.set_edge_label(0, 1, [2])

    assert graph.edge_weight(0, 1) == 2.0
    assert graph.edge_label(0, 1) == (2,)

    graph.remove_edge(0, 1)
    assert not graph.edge_exists(0, 1)
    assert graph.edge_weight(0, 1) == 0.0
    assert graph.edge_label(0, 1) == ()


def test_adjacency_list_graph_constructor():
    graph = AdjacencyListGraph()
    assert len(graph) == 0
    assert graph.is_empty()

    graph2 = AdjacencyListGraph(3)
    assert len(graph2) == 3
    assert not graph2.is_empty()


def test_adjacency_list_graph_vertex_edge_adding():
    graph = AdjacencyListGraph(2)
    new_node = graph.add_node((0,))
    assert new_node == 2
    assert graph.node_label(2) == (0,)

    graph.add_edge(0, 1, 1.0, [0])
    graph.add_edge(1, 2, 2.0, [0])
    graph.add_edge(2, 0, 3.0, [1])

    assert graph.edge_exists(0, 1)
    assert graph.edge_exists(1, 2)
    assert graph.edge_exists(2, 0)
    assert not graph.edge_exists(1, 0)

    assert graph.edge_weight(0, 1) == 1.0
    assert graph.edge_weight(1, 2) == 2.0
    assert graph.edge_weight(2, 0) == 3.0

    assert graph.edge_label(0, 1) == (0,)
    assert graph.edge_label(1, 2) == (0,)
    assert graph.edge_label(2, 0) == (1,)

    assert len(graph.edges()) == 3


def test_adjacency_list_graph_edge_modification():
    graph = AdjacencyListGraph(3)
    graph.add_edge(0, 1, 1.0, [2])
    graph.set_edge_weight(0, 1, 2.0)
    graph.set_edge_label(0, 1, [1])

    assert graph.edge_weight(0, 1) == 2.0
    assert graph.edge_label(0, 1) == (1,)

    graph.remove_edge(0, 1)
    assert not graph.edge_exists(0, 1)
    assert graph.edge_weight(0, 1) == 0.0
    assert graph.edge_label(0, 1) == ()


class _StubGraph(Graph):
    def __len__(self):
        return 0

    def add_edge(self, src, dest, weight, label):
        pass

    def remove_edge(self, src, dest):
        pass

    def add_node(self, label):
        return 0

    def edges(self):
        return []

    def edges_from(self, node):
        return []

    def edge_weight(self, src, dest):
        return 0.0

    def edge_label(self, src, dest):
        return ()

    def set_edge_label(self, src, dest, label):
        pass

    def set_edge_weight(self, src, dest, weight):
        pass

    def neighbors(self, index):
        return []


def test_abstract_class_behavior():
    graph = _StubGraph()
    assert Graph.is_empty(graph)
    assert not Graph.edge_exists(graph, 0, 1)


def test_graph_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Graph()


@pytest.mark.parametrize("cls", [MatrixGraph, AdjacencyListGraph])
def test_out_of_range_indices_raise(cls):
    graph = cls(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, 1, [0])
    with pytest.raises(IndexError):
        graph.edge_weight(5, 0)
    with pytest.raises(IndexError):
        graph.neighbors(2)
    with pytest.raises(IndexError):
        graph.node_label(2)


def test_labels_must_match_nodes():
    with pytest.raises(ValueError):
        MatrixGraph(2, [(0,)])
    graph = MatrixGraph(2, [(0,), (1,)])
    assert graph.nodes() == [Node(0, (0,)), Node(1, (1,))]


@pytest.mark.parametrize("cls", [MatrixGraph, AdjacencyListGraph])
def test_zero_weight_and_duplicate_edges_ignored(cls):
    graph = cls(2)
    graph.add_edge(0, 1, 0, [5])
    assert not graph.edge_exists(0, 1)
    graph.add_edge(0, 1, 1, [0])
    graph.add_edge(0, 1, 4, [1])
    assert graph.edge_weight(0, 1) == 1
    assert graph.edge_label(0, 1) == (0,)


@pytest.mark.parametrize("cls", [MatrixGraph, AdjacencyListGraph])
def test_edges_ordered_by_source_then_dest(cls):
    graph = cls(3)
    graph.add_edge(2, 0, 1, [0])
    graph.add_edge(0, 2, 1, [1])
    graph.add_edge(0, 1, 1, [2])
    graph.add_edge(1, 1, 1, [3])
    pairs = [(e.source, e.dest) for e in graph.edges()]
    assert pairs == sorted(pairs)
    assert len(pairs) == 4
    assert Edge(0, 2, 1, (1,)) in graph.edges()


@pytest.mark.parametrize("cls", [MatrixGraph, AdjacencyListGraph])
def test_edges_from_and_neighbors_agree(cls):
    graph = cls(3)
    graph.add_edge(1, 0, 1, [0])
    graph.add_edge(1, 2, 1, [1])
    graph.add_edge(0, 1, 1, [1])
    assert sorted(graph.neighbors(1)) == [0, 2]
    assert sorted(e.dest for e in graph.edges_from(1)) == [0, 2]
    assert all(e.source == 1 for e in graph.edges_from(1))


def test_set_label_on_missing_edge_is_ignored():
    graph = MatrixGraph(2)
    graph.set_edge_label(0, 1, [3])
    graph.set_edge_weight(0, 1, 3.0)
    assert graph.edge_label(0, 1) == ()
    assert not graph.edge_exists(0, 1)


def test_set_node_label():
    graph = AdjacencyListGraph(2)
    graph.set_node_label(1, [4, 2])
    graph.set_node_label(7, [1])
    assert graph.node_label(1) == (4, 2)
    assert len(graph.nodes()) == 2


def test_from_matrices_and_copy_are_independent():
    graph = MatrixGraph.from_matrices([[0, 1], [1, 0]], [[(), (0,)], [(1,), ()]])
    assert graph.edge_label(1, 0) == (1,)
    duplicate = graph.copy()
    duplicate.remove_edge(0, 1)
    assert graph.edge_exists(0, 1)
    assert not duplicate.edge_exists(0, 1)


def test_from_matrices_rejects_bad_shapes():
    with pytest.raises(ValueError):
        MatrixGraph.from_matrices([[0, 1]], [[(), ()]])
    with pytest.raises(ValueError):
        MatrixGraph.from_matrices([[0, 1], [1, 0]], [[(), ()]])


def test_adjacency_matrix_is_read_only():
    graph = MatrixGraph(2)
    matrix = graph.adjacency_matrix
    assert not matrix.flags.writeable
    with pytest.raises(ValueError):
        matrix[0, 0] = 1.0
    assert graph.adjacency_matrix[0, 0] == 0.0
    assert not graph.edge_exists(0, 0)


def test_adjacency_list_copy_is_independent():
    graph = AdjacencyListGraph(2)
    graph.add_edge(0, 1, 1, [0])
    duplicate = graph.copy()
    duplicate.remove_edge(0, 1)
    assert graph.edge_exists(0, 1)
    assert graph.adjacency_list[0][1] == Edge(0, 1, 1, (0,))
    assert duplicate.adjacency_list[0] == {}


def test_complement():
    graph = UnweightedMatrixGraph(2)
    graph.add_edge(0, 0, 1, [0])
    graph.add_edge(0, 1, 1, [1])
    complement = graph.complement()
    assert isinstance(complement, UnweightedMatrixGraph)
    assert np.array_equal(complement.adjacency_matrix, [[0, 0], [1, 1]])
    assert complement.label_matrix == [[(), ()], [(), ()]]
    assert np.array_equal(complement.complement().adjacency_matrix, graph.adjacency_matrix)