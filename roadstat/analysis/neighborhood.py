"""
Distance-gap neighborhood counts.

A node m is index-gapped relative to n when abs(m - n) >= gap (internal indices,
not hop distance). For every node n:

- distance 1: each gapped direct neighbor is counted once.
- distance 2: for each direct neighbor, the first second-hop node that is not a
  direct neighbor of n, is gapped, and was not counted at distance 1 earns one
  credit; the rest of that neighbor's list is skipped.
"""

from __future__ import annotations

from dataclasses import dataclass

from roadstat.graph.graph import RoadGraph

DEFAULT_GAP_THRESHOLD = 5000


@dataclass(frozen=True)
class DistanceGapCounts:
    """Totals across all nodes."""

    distance_1: int
    distance_2: int


def _is_gapped(a: int, b: int, gap: int) -> bool:
    return abs(a - b) >= gap


def _node_counts(graph: RoadGraph, node: int, gap: int) -> tuple[int, int]:
    direct = graph.neighbors(node)
    direct_set = set(direct)
    counted: set[int] = set()
    distance_1 = 0
    for neighbor in direct:
        if _is_gapped(neighbor, node, gap) and neighbor not in counted:
            distance_1 += 1
            counted.add(neighbor)

    distance_2 = 0
    for neighbor in direct:
        for second in graph.neighbors(neighbor):
            if (
                second not in direct_set
                and _is_gapped(second, node, gap)
                and second not in counted
            ):
                distance_2 += 1
                break  # at most one credit per first-hop neighbor
    return distance_1, distance_2


def count_distance_gap_neighbors(
    graph: RoadGraph,
    gap: int = DEFAULT_GAP_THRESHOLD,
) -> DistanceGapCounts:
    """Total distance-1 and distance-2 index-gapped neighbor counts over all nodes."""
    total_1 = 0
    total_2 = 0
    for node in graph.node_indices():
        d1, d2 = _node_counts(graph, node, gap)
        total_1 += d1
        total_2 += d2
    return DistanceGapCounts(distance_1=total_1, distance_2=total_2)
