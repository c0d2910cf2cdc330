"""Minimum spanning trees of graphs given as adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Edge", "prim_mst", "format_mst"]


@dataclass(frozen=True)
class Edge:
    """An edge of a spanning tree from vertex ``u`` to vertex ``v``."""

    u: int
    v: int
    weight: int


def prim_mst(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, in the order Prim's
    algorithm picks them starting from vertex 0.

    A zero entry in the matrix means there is no edge. On equal weights the
    edge found first, scanning rows then columns, wins.
    """
    matrix = [list(row) for row in graph]
    count = len(matrix)
    if any(len(row) != count for row in matrix):
        raise ValueError("adjacency matrix must be square")
    selected = [False] * count
    if count:
        selected[0] = True
    edges: list[Edge] = []
    for _ in range(count - 1):
        best: Edge | None = None
        for i, row in enumerate(matrix):
            if not selected[i]:
                continue
            for j, weight in enumerate(row):
                if selected[j] or not weight:
                    continue
                if best is None or weight < best.weight:
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        selected[best.v] = True
        edges.append(best)
    return edges


def format_mst(edges: Iterable[Edge]) -> str:
    """Return a table of spanning-tree edges and their weights."""
    lines = ["Edge \tWeight"]
    lines.extend(f"{edge.u} - {edge.v}\t{edge.weight}" for edge in edges)
    return "\n".join(lines)