"""Breadth-first visit of a graph loaded from a CSV file of labelled edges."""

from __future__ import annotations

import re
import sys
import time
from collections import deque
from typing import Any, Iterable, Iterator, Optional, TextIO

from algolab.graph import Graph
from algolab.hashtable import HashTable, hash_string, key_compare

_LINE_LIMIT = 255
_FIELD_LIMIT = 127
_EDGE_RE = re.compile(
    rf"([^,]{{1,{_FIELD_LIMIT}}}),([^,]{{1,{_FIELD_LIMIT}}}),([^\n]{{1,{_FIELD_LIMIT}}})"
)


def breadth_first_visit(graph: Graph, start: Any) -> list[Any]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    if start is None:
        raise ValueError("start node must not be None")
    if not graph.contains_node(start):
        raise KeyError(start)
    visited = HashTable(graph._compare, graph._adjacency.hash_function)
    visited.put(start, True)
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in graph.neighbours(node):
            if neighbour not in visited:
                visited.put(neighbour, True)
                queue.append(neighbour)
    return order


def _chunks(lines: Iterable[str]) -> Iterator[str]:
    """Split over-long lines the way a fixed-size line buffer would."""
    for line in lines:
        while len(line) > _LINE_LIMIT:
            yield line[:_LINE_LIMIT]
            line = line[_LINE_LIMIT:]
        if line:
            yield line


def load_graph(lines: Iterable[str]) -> Graph:
    """Build an undirected labelled graph from ``node1,node2,label`` lines.

    Lines that do not have three non-empty fields are skipped.
    """
    graph = Graph(True, False, key_compare, hash_string)
    for line in _chunks(lines):
        match = _EDGE_RE.match(line)
        if match is None:
            continue
        node1, node2, label = match.groups()
        graph.add_node(node1)
        graph.add_node(node2)
        graph.add_edge(node1, node2, label)
    return graph


def bfs(src: Iterable[str], city: str, result: TextIO) -> list[Any]:
    """Load a graph from ``src`` and write the visit from ``city``, one node per line."""
    start = time.perf_counter()
    graph = load_graph(src)
    elapsed = time.perf_counter() - start
    print(f"Reading file and Graph creation completed in {elapsed:.2f} seconds!")

    start = time.perf_counter()
    start_node = next((node for node in graph.nodes() if key_compare(node, city) == 0), None)
    order: list[Any] = []
    if start_node is not None:
        order = breadth_first_visit(graph, start_node)
        for node in order:
            result.write(f"{node}\n")
    elapsed = time.perf_counter() - start
    print(f"BFS completed in {elapsed:.2f} seconds!")
    return order


def main(argv: Optional[list[str]] = None) -> int:
    """Command line: <graph csv> <start city> <output file>."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print("Insufficient arguments!")
        return 1
    source_path, city, result_path = args
    try:
        src = open(source_path, encoding="utf-8", errors="surrogateescape")
    except OSError:
        print("Errore nell'apertura del file!")
        return 1
    with src:
        try:
            result = open(result_path, "w", encoding="utf-8", errors="surrogateescape")
        except OSError:
            print("Errore nella creazione del file!")
            return 1
        with result:
            bfs(src, city, result)
    print("ALL DONE!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())