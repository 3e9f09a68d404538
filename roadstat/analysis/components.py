"""
Connected components under undirected reachability.
"""

from __future__ import annotations

from collections import deque

from roadstat.graph.graph import RoadGraph


def _component_of(graph: RoadGraph, start: int, seen: list[bool]) -> int:
    """BFS from start, marking seen; return the component size."""
    q: deque[int] = deque([start])
    seen[start] = True
    size = 0
    while q:
        n = q.popleft()
        size += 1
        for neighbor in graph.neighbors(n):
            if not seen[neighbor]:
                seen[neighbor] = True
                q.append(neighbor)
    return size


def connected_component_sizes(graph: RoadGraph) -> list[int]:
    """Sizes of all connected components, largest first. Sizes sum to node_count."""
    seen = [False] * graph.node_count
    sizes: list[int] = []
    for node in graph.node_indices():
        if not seen[node]:
            sizes.append(_component_of(graph, node, seen))
    sizes.sort(reverse=True)
    return sizes


def count_connected_components(graph: RoadGraph) -> int:
    """Number of connected components; 0 only for an empty graph."""
    return len(connected_component_sizes(graph))
