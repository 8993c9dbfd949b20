"""A graph kept as adjacency lists in a hash table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from algolab.hashtable import Compare, HashFunction, HashTable, hash_string, key_compare


@dataclass(frozen=True)
class Edge:
    """An edge from ``source`` to ``dest`` carrying an optional label."""

    source: Any
    dest: Any
    label: Any = None


class Graph:
    """Directed or undirected graph whose nodes are compared and hashed by given functions.

    In an undirected graph every edge is stored in both directions.
    """

    def __init__(
        self,
        labelled: bool,
        directed: bool,
        compare: Compare = key_compare,
        hash_function: HashFunction = hash_string,
    ) -> None:
        self.labelled = bool(labelled)
        self.directed = bool(directed)
        self._compare = compare
        self._adjacency = HashTable(compare, hash_function)

    def is_directed(self) -> bool:
        """Whether edges have a direction."""
        return self.directed

    def is_labelled(self) -> bool:
        """Whether the graph was created as labelled."""
        return self.labelled

    @staticmethod
    def _require(*values: Any) -> None:
        if any(value is None for value in values):
            raise ValueError("nodes and labels must not be None")

    def _edges_from(self, node: Any) -> Optional[list[Edge]]:
        return self._adjacency.get(node)

    def add_node(self, node: Any) -> bool:
        """Add ``node``; return False if an equal node is already present."""
        self._require(node)
        if node in self._adjacency:
            return False
        self._adjacency.put(node, [])
        return True

    def add_edge(self, node1: Any, node2: Any, label: Any) -> bool:
        """Add an edge between two existing nodes (both ways if undirected)."""
        self._require(node1, node2, label)
        if node1 not in self._adjacency or node2 not in self._adjacency:
            raise KeyError("both endpoints must be nodes of the graph")
        self._edges_from(node1).append(Edge(node1, node2, label))
        if not self.directed:
            self._edges_from(node2).append(Edge(node2, node1, label))
        return True

    def contains_node(self, node: Any) -> bool:
        """Whether ``node`` is in the graph."""
        return node in self._adjacency

    def contains_edge(self, node1: Any, node2: Any) -> bool:
        """True when both endpoints are nodes of the graph.

        Only the presence of the two nodes is checked, not the edge itself.
        """
        return node1 in self._adjacency and node2 in self._adjacency

    def _drop_edges_to(self, source: Any, dest: Any) -> bool:
        edges = self._edges_from(source)
        if edges is None:
            return False
        kept = [edge for edge in edges if self._compare(edge.dest, dest) != 0]
        if len(kept) == len(edges):
            return False
        edges[:] = kept
        return True

    def remove_node(self, node: Any) -> bool:
        """Remove ``node`` with all its edges; return False if it was absent."""
        self._require(node)
        if node not in self._adjacency:
            return False
        for other in self._adjacency.keys():
            if self._compare(other, node) == 0:
                continue
            self._drop_edges_to(other, node)
        self._adjacency.remove(node)
        return True

    def remove_edge(self, node1: Any, node2: Any) -> bool:
        """Remove every edge from ``node1`` to ``node2`` (and back if undirected)."""
        self._require(node1, node2)
        if node1 not in self._adjacency or node2 not in self._adjacency:
            return False
        removed = self._drop_edges_to(node1, node2)
        if not self.directed:
            removed = self._drop_edges_to(node2, node1) or removed
        return removed

    def num_nodes(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    def num_edges(self) -> int:
        """Number of edges; each undirected edge counts once."""
        total = sum(len(edges) for _, edges in self._adjacency.items())
        return total if self.directed else total // 2

    def nodes(self) -> list[Any]:
        """All nodes, in table order."""
        return self._adjacency.keys()

    def edges(self) -> list[Edge]:
        """All edges; an undirected edge is given once, with source not after dest."""
        return [
            edge
            for _, adjacency in self._adjacency.items()
            for edge in adjacency
            if self.directed or self._compare(edge.source, edge.dest) <= 0
        ]

    def neighbours(self, node: Any) -> list[Any]:
        """Destinations of the edges leaving ``node``, in insertion order."""
        self._require(node)
        edges = self._edges_from(node)
        if edges is None:
            raise KeyError(node)
        return [edge.dest for edge in edges]

    def num_neighbours(self, node: Any) -> int:
        """Number of edges leaving ``node``; 0 for a node not in the graph."""
        self._require(node)
        edges = self._edges_from(node)
        return 0 if edges is None else len(edges)

    def get_label(self, node1: Any, node2: Any) -> Any:
        """Label of the first edge from ``node1`` to ``node2``, or None."""
        if node1 is None or node2 is None:
            return None
        for edge in self._edges_from(node1) or ():
            if self._compare(edge.dest, node2) == 0:
                return edge.label
        return None

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.num_nodes()}, edges={self.num_edges()})"