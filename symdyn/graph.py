"""Directed, weighted, labelled graphs stored as matrices or adjacency lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from itertools import chain
from typing import Any, Iterable, Optional

import numpy as np

from symdyn.words import Word


@dataclass(frozen=True)
class Edge:
    """A directed edge; edges order by source, then destination."""

    source: int = 0
    dest: int = 0
    weight: Any = 0
    label: Word = ()

    def __lt__(self, other: "Edge") -> bool:
        return (self.source, self.dest) < (other.source, other.dest)


@dataclass(frozen=True)
class Node:
    """A node index with its label; nodes order by index."""

    index: int
    label: Word = ()

    def __lt__(self, other: "Node") -> bool:
        return self.index < other.index


def _edge_key(edge: Edge) -> tuple[int, int]:
    return edge.source, edge.dest


class Graph(ABC):
    """A directed graph in which a weight of zero means there is no edge."""

    def __init__(self) -> None:
        self._node_labels: list[Word] = []

    @abstractmethod
    def add_edge(self, src: int, dest: int, weight: Any, label: Iterable[int]) -> None:
        """Add an edge unless the weight is zero or the edge already exists."""

    @abstractmethod
    def remove_edge(self, src: int, dest: int) -> None:
        """Remove an edge if it exists."""

    @abstractmethod
    def add_node(self, label: Iterable[int]) -> int:
        """Add a node and return its index."""

    @abstractmethod
    def edges(self) -> list[Edge]:
        """Return all edges ordered by source, then destination."""

    @abstractmethod
    def edges_from(self, node: int) -> list[Edge]:
        """Return the edges leaving ``node``."""

    @abstractmethod
    def edge_weight(self, src: int, dest: int) -> Any:
        """Return the weight of an edge, zero if there is none."""

    @abstractmethod
    def edge_label(self, src: int, dest: int) -> Word:
        """Return the label of an edge, the empty word if there is none."""

    @abstractmethod
    def set_edge_label(self, src: int, dest: int, label: Iterable[int]) -> None:
        """Relabel an existing edge; missing edges are left alone."""

    @abstractmethod
    def set_edge_weight(self, src: int, dest: int, weight: Any) -> None:
        """Reweight an existing edge; missing edges are left alone."""

    @abstractmethod
    def neighbors(self, index: int) -> list[int]:
        """Return the destinations of the edges leaving ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of nodes."""

    def nodes(self) -> list[Node]:
        return [Node(i, label) for i, label in enumerate(self._node_labels)]

    def edge_exists(self, src: int, dest: int) -> bool:
        return self.edge_weight(src, dest) != 0

    def node_label(self, index: int) -> Word:
        self._validate_indices(index, 0)
        return self._node_labels[index]

    def set_node_label(self, index: int, label: Iterable[int]) -> None:
        """Relabel a node; indices without a node are ignored."""
        if 0 <= index < len(self._node_labels):
            self._node_labels[index] = tuple(label)

    def is_empty(self) -> bool:
        return len(self) == 0

    def _validate_indices(self, src: int, dest: int) -> None:
        size = len(self)
        if not (0 <= src < size and 0 <= dest < size):
            raise IndexError("Source or destination index out of range")


class MatrixGraph(Graph):
    """A graph stored as a dense adjacency matrix and a matrix of labels."""

    dtype: Any = np.float64

    def __init__(self, nodes: int = 0, labels: Optional[Iterable[Iterable[int]]] = None) -> None:
        super().__init__()
        if labels is None:
            node_labels: list[Word] = [() for _ in range(nodes)]
        else:
            node_labels = [tuple(label) for label in labels]
            if len(node_labels) != nodes:
                raise ValueError("Number of labels must match number of nodes")
        self._adjacency = np.zeros((nodes, nodes), dtype=self.dtype)
        self._labels: list[list[Word]] = [[() for _ in range(nodes)] for _ in range(nodes)]
        self._node_labels = node_labels

    @classmethod
    def from_matrices(cls, adjacency_matrix: Any, label_matrix: Iterable[Iterable[Iterable[int]]]):
        """Build a graph from a square adjacency matrix and a matching label matrix."""
        adjacency = np.array(adjacency_matrix, dtype=cls.dtype)
        if adjacency.size == 0:
            adjacency = adjacency.reshape(0, 0)
        if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
            raise ValueError("Adjacency matrix must be square")
        size = adjacency.shape[0]
        labels = [[tuple(label) for label in row] for row in label_matrix]
        if len(labels) != size or any(len(row) != size for row in labels):
            raise ValueError("Label matrix must have the shape of the adjacency matrix")
        graph = cls(size)
        graph._adjacency = adjacency
        graph._labels = labels
        return graph

    def __len__(self) -> int:
        return self._adjacency.shape[0]

    def add_node(self, label: Iterable[int]) -> int:
        size = len(self) + 1
        grown = np.zeros((size, size), dtype=self.dtype)
        grown[:-1, :-1] = self._adjacency
        self._adjacency = grown
        for row in self._labels:
            row.append(())
        self._labels.append([() for _ in range(size)])
        self._node_labels.append(tuple(label))
        return size - 1

    def add_edge(self, src: int, dest: int, weight: Any, label: Iterable[int]) -> None:
        self._validate_indices(src, dest)
        if weight == 0 or self.edge_exists(src, dest):
            return
        self._adjacency[src, dest] = weight
        self._labels[src][dest] = tuple(label)

    def remove_edge(self, src: int, dest: int) -> None:
        self._validate_indices(src, dest)
        if not self.edge_exists(src, dest):
            return
        self._adjacency[src, dest] = 0
        self._labels[src][dest] = ()

    def _edge(self, src: int, dest: int) -> Edge:
        return Edge(src, dest, self._adjacency[src, dest].item(), self._labels[src][dest])

    def edges(self) -> list[Edge]:
        return [self._edge(int(i), int(j)) for i, j in np.argwhere(self._adjacency != 0)]

    def edges_from(self, node: int) -> list[Edge]:
        self._validate_indices(node, 0)
        return [self._edge(node, int(j)) for j in np.flatnonzero(self._adjacency[node])]

    def edge_weight(self, src: int, dest: int) -> Any:
        self._validate_indices(src, dest)
        return self._adjacency[src, dest].item()

    def edge_label(self, src: int, dest: int) -> Word:
        self._validate_indices(src, dest)
        return self._labels[src][dest]

    def set_edge_label(self, src: int, dest: int, label: Iterable[int]) -> None:
        self._validate_indices(src, dest)
        if self.edge_exists(src, dest):
            self._labels[src][dest] = tuple(label)

    def set_edge_weight(self, src: int, dest: int, weight: Any) -> None:
        self._validate_indices(src, dest)
        if self.edge_exists(src, dest):
            self._adjacency[src, dest] = weight

    def neighbors(self, index: int) -> list[int]:
        self._validate_indices(index, 0)
        return [int(j) for j in np.flatnonzero(self._adjacency[index])]

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """A read-only view of the adjacency matrix."""
        view = self._adjacency.view()
        view.flags.writeable = False
        return view

    @property
    def label_matrix(self) -> list[list[Word]]:
        """A copy of the matrix of edge labels."""
        return [list(row) for row in self._labels]

    def copy(self):
        graph = type(self).from_matrices(self._adjacency, self._labels)
        graph._node_labels = list(self._node_labels)
        return graph


class AdjacencyListGraph(Graph):
    """A graph stored as one mapping from destination to edge per node."""

    def __init__(self, nodes: int = 0) -> None:
        super().__init__()
        self._adjacency: list[dict[int, Edge]] = [{} for _ in range(nodes)]
        self._node_labels = [() for _ in range(nodes)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_node(self, label: Iterable[int]) -> int:
        self._adjacency.append({})
        self._node_labels.append(tuple(label))
        return len(self._adjacency) - 1

    def add_edge(self, src: int, dest: int, weight: Any, label: Iterable[int]) -> None:
        self._validate_indices(src, dest)
        if weight == 0 or self.edge_exists(src, dest):
            return
        self._adjacency[src][dest] = Edge(src, dest, weight, tuple(label))

    def remove_edge(self, src: int, dest: int) -> None:
        self._validate_indices(src, dest)
        if self.edge_exists(src, dest):
            del self._adjacency[src][dest]

    def edges(self) -> list[Edge]:
        return sorted(
            chain.from_iterable(targets.values() for targets in self._adjacency),
            key=_edge_key,
        )

    def edges_from(self, node: int) -> list[Edge]:
        self._validate_indices(node, 0)
        return list(self._adjacency[node].values())

    def edge_weight(self, src: int, dest: int) -> Any:
        self._validate_indices(src, dest)
        edge = self._adjacency[src].get(dest)
        return 0 if edge is None else edge.weight

    def edge_label(self, src: int, dest: int) -> Word:
        self._validate_indices(src, dest)
        edge = self._adjacency[src].get(dest)
        return () if edge is None else edge.label

    def set_edge_label(self, src: int, dest: int, label: Iterable[int]) -> None:
        self._validate_indices(src, dest)
        if self.edge_exists(src, dest):
            edge = self._adjacency[src][dest]
            self._adjacency[src][dest] = replace(edge, label=tuple(label))

    def set_edge_weight(self, src: int, dest: int, weight: Any) -> None:
        self._validate_indices(src, dest)
        if self.edge_exists(src, dest):
            edge = self._adjacency[src][dest]
            self._adjacency[src][dest] = replace(edge, weight=weight)

    def neighbors(self, index: int) -> list[int]:
        self._validate_indices(index, 0)
        return list(self._adjacency[index])

    @property
    def adjacency_list(self) -> list[dict[int, Edge]]:
        """A copy of the per-node mappings from destination to edge."""
        return [dict(targets) for targets in self._adjacency]

    def copy(self) -> "AdjacencyListGraph":
        graph = AdjacencyListGraph()
        graph._adjacency = self.adjacency_list
        graph._node_labels = list(self._node_labels)
        return graph


class UnweightedMatrixGraph(MatrixGraph):
    """A matrix graph with integer edge multiplicities."""

    dtype = np.int64

    def complement(self) -> "UnweightedMatrixGraph":
        """Return the graph with an unlabelled edge exactly where this one has none."""
        size = len(self)
        matrix = (self._adjacency == 0).astype(self.dtype)
        labels = [[() for _ in range(size)] for _ in range(size)]
        return UnweightedMatrixGraph.from_matrices(matrix, labels)