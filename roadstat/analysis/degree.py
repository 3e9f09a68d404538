"""
Degree statistics: per-node degree, degree distribution, high-degree node count.
"""

from __future__ import annotations

from collections import Counter

from roadstat.graph.graph import RoadGraph

DEFAULT_DEGREE_THRESHOLD = 4


def node_degrees(graph: RoadGraph) -> list[int]:
    """Degree of each node by index (incident edges, parallel edges counted separately)."""
    return [graph.degree(n) for n in graph.node_indices()]


def degree_distribution(graph: RoadGraph) -> dict[int, int]:
    """Map degree -> number of nodes with that degree, in ascending degree order."""
    counts = Counter(node_degrees(graph))
    return {degree: counts[degree] for degree in sorted(counts)}


def count_high_degree_nodes(graph: RoadGraph, threshold: int = DEFAULT_DEGREE_THRESHOLD) -> int:
    """Number of nodes whose degree is strictly greater than threshold."""
    return sum(1 for degree in node_degrees(graph) if degree > threshold)
