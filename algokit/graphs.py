"""Shortest paths on weighted directed graphs: Bellman-Ford and Floyd-Warshall."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, TextIO

INF_LABEL = "INF"
NEGATIVE_CYCLE_MESSAGE = (
    "Graph contains negative weight cycle. Hence, shortest distance not guaranteed."
)

Distance = Optional[int]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest distances undefined."""


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dst: int
    weight: int


@dataclass
class Graph:
    """A directed graph on vertices ``0 .. vertex_count - 1``.

    When ``max_edges`` is given, edges added beyond that count are ignored.
    """

    vertex_count: int
    max_edges: Optional[int] = None
    edges: list[Edge] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        if self.max_edges is not None and self.max_edges < 0:
            raise ValueError("edge count must not be negative")

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dst: int, weight: int) -> None:
        """Add an edge; silently ignored once ``max_edges`` edges are stored."""
        self._check_vertex(src)
        self._check_vertex(dst)
        if self.max_edges is not None and len(self.edges) >= self.max_edges:
            return
        self.edges.append(Edge(src, dst, weight))


def bellman_ford(graph: Graph, source: int) -> list[Distance]:
    """Distances from ``source`` to every vertex; ``None`` marks unreachable.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    graph._check_vertex(source)
    distances: list[Distance] = [None] * graph.vertex_count
    distances[source] = 0

    def relaxations() -> Iterator[tuple[int, int]]:
        for edge in graph.edges:
            start = distances[edge.src]
            if start is None:
                continue
            candidate = start + edge.weight
            current = distances[edge.dst]
            if current is None or candidate < current:
                yield edge.dst, candidate

    for _ in range(graph.vertex_count):
        for vertex, candidate in relaxations():
            current = distances[vertex]
            if current is None or candidate < current:
                distances[vertex] = candidate

    if any(True for _ in relaxations()):
        raise NegativeCycleError(NEGATIVE_CYCLE_MESSAGE)
    return distances


def floyd_warshall(graph: Graph) -> list[list[Distance]]:
    """All-pairs distance matrix; ``None`` marks unreachable pairs.

    A later edge between the same pair of vertices replaces an earlier one.
    """
    size = graph.vertex_count
    dist: list[list[Distance]] = [
        [0 if i == j else None for j in range(size)] for i in range(size)
    ]
    for edge in graph.edges:
        dist[edge.src][edge.dst] = edge.weight

    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k is None:
                continue
            for j, from_k in enumerate(through):
                if from_k is None:
                    continue
                candidate = to_k + from_k
                if row[j] is None or candidate < row[j]:
                    row[j] = candidate
    return dist


def _label(value: Distance) -> str:
    return INF_LABEL if value is None else str(value)


def format_distances(distances: Sequence[Distance]) -> str:
    """Render a distance list as a vertex/distance table."""
    lines = ["Vertex  Distance"]
    lines.extend(f"{vertex}\t{_label(value)}" for vertex, value in enumerate(distances))
    return "\n".join(lines)


def format_matrix(matrix: Sequence[Sequence[Distance]]) -> str:
    """Render a distance matrix, each cell followed by a tab."""
    return "\n".join("".join(f"{_label(cell)}\t" for cell in row) for row in matrix)


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _ask(prompt: str, reader: Iterator[int]) -> int:
    print(prompt, end="", flush=True)
    value = next(reader, None)
    if value is None:
        raise ValueError("unexpected end of input")
    return value


def _read_graph(reader: Iterator[int], bounded: bool) -> Graph:
    vertex_count = _ask("Enter number of vertices: ", reader)
    edge_count = _ask("Enter number of edges: ", reader)
    graph = Graph(vertex_count, edge_count if bounded else None)
    for number in range(1, edge_count + 1):
        src = _ask(f"\nEdge {number}\nEnter source: ", reader)
        dst = _ask("Enter destination: ", reader)
        weight = _ask("Enter weight: ", reader)
        graph.add_edge(src, dst, weight)
    return graph


def bellman_ford_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a graph and a source from standard input and print distances."""
    parser = argparse.ArgumentParser(
        prog="bellman-ford",
        description="Single-source shortest paths read interactively from stdin.",
    )
    parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        graph = _read_graph(reader, bounded=True)
        source = _ask("\nEnter source: ", reader)
        distances = bellman_ford(graph, source)
    except NegativeCycleError:
        print(NEGATIVE_CYCLE_MESSAGE)
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print()
    print(format_distances(distances))
    return 0


def floyd_warshall_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a graph from standard input and print its distance matrix."""
    parser = argparse.ArgumentParser(
        prog="floyd-warshall",
        description="All-pairs shortest paths read interactively from stdin.",
    )
    parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        graph = _read_graph(reader, bounded=False)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print()
    print("The Distance matrix for Floyd - Warshall")
    print(format_matrix(floyd_warshall(graph)))
    return 0