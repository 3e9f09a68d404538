"""
Bounded single-source shortest paths (unit edge weights, so BFS hop counts).
"""

from __future__ import annotations

from collections import deque

from roadstat.graph.graph import RoadGraph, UnknownLabelError


class StartNodeError(IndexError):
    """Start node is not an index (or label) of the graph."""


def resolve_start_node(graph: RoadGraph, start: int, by_label: bool = False) -> int:
    """
    Turn a configured start value into an internal index.

    By default start is already an internal index and is only bounds-checked.
    With by_label=True start is an external label looked up in the label table.

    Raises:
        StartNodeError: index out of range, or label not in the graph
    """
    if by_label:
        try:
            return graph.index_of(start)
        except UnknownLabelError:
            raise StartNodeError(f"Start label {start} is not in the graph") from None
    if not graph.has_index(start):
        raise StartNodeError(
            f"Start index {start} out of range for graph with {graph.node_count} nodes"
        )
    return start


def bounded_shortest_paths(graph: RoadGraph, start: int, cutoff: int) -> list[tuple[int, int]]:
    """
    BFS from internal index start; return (node_index, distance) for every node
    with distance <= cutoff, in discovery order. The start node comes first with 0.

    Raises:
        StartNodeError: start is not a valid node index
        ValueError: cutoff is negative
    """
    if cutoff < 0:
        raise ValueError(f"cutoff must be >= 0, got {cutoff}")
    resolve_start_node(graph, start)

    distances: dict[int, int] = {start: 0}
    result: list[tuple[int, int]] = [(start, 0)]
    q: deque[int] = deque([start])
    while q:
        n = q.popleft()
        d = distances[n]
        if d == cutoff:
            continue
        for neighbor in graph.neighbors(n):
            if neighbor not in distances:
                distances[neighbor] = d + 1
                result.append((neighbor, d + 1))
                q.append(neighbor)
    return result
