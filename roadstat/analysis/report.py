"""
AnalysisReport: results of the analysis battery, deterministic JSON serialization and text rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from roadstat.analysis.neighborhood import DistanceGapCounts

REPORT_SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class AnalysisReport:
    """All statistics for one graph, in reporting order."""

    node_count: int
    edge_count: int
    degree_threshold: int
    high_degree_count: int
    gap_threshold: int
    distance_gap: DistanceGapCounts
    component_count: int
    largest_component_size: int
    degree_distribution: tuple[tuple[int, int], ...]  # (degree, node count), ascending
    start_node: int  # internal index
    start_label: int  # external label of start_node
    start_by_label: bool  # start was given as a label
    cutoff: int
    shortest_paths: tuple[tuple[int, int], ...]  # (node index, distance), discovery order


def report_to_dict(report: AnalysisReport) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Degree keys are strings so the dict survives a JSON round trip unchanged.
    """
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "node_count": report.node_count,
        "edge_count": report.edge_count,
        "high_degree": {
            "threshold": report.degree_threshold,
            "count": report.high_degree_count,
        },
        "distance_gap": {
            "gap_threshold": report.gap_threshold,
            "distance_1": report.distance_gap.distance_1,
            "distance_2": report.distance_gap.distance_2,
        },
        "components": {
            "count": report.component_count,
            "largest_size": report.largest_component_size,
        },
        "degree_distribution": {
            str(degree): count for degree, count in report.degree_distribution
        },
        "shortest_paths": {
            "start_node": report.start_node,
            "start_label": report.start_label,
            "cutoff": report.cutoff,
            "distances": [
                {"node": node, "distance": distance}
                for node, distance in report.shortest_paths
            ],
        },
    }


def render_report_text(report: AnalysisReport) -> list[str]:
    """Human-readable lines, one block per analysis in the fixed order."""
    lines = [
        f"Total number of nodes: {report.node_count}",
        "Total number of nodes with more than "
        f"{report.degree_threshold} connections: {report.high_degree_count}",
        "Number of nodes meeting the distance-1 connection criteria: "
        f"{report.distance_gap.distance_1}",
        "Number of nodes meeting the distance-2 connection criteria: "
        f"{report.distance_gap.distance_2}",
        f"Number of connected components: {report.component_count}",
        "Degree Distribution:",
    ]
    for degree, count in report.degree_distribution:
        lines.append(f"Degree {degree}: {count} nodes")
    if report.start_by_label:
        origin = f"{report.start_label} (index {report.start_node})"
    else:
        origin = str(report.start_node)
    for node, distance in report.shortest_paths:
        lines.append(f"Distance from node {origin} to node {node} is {distance}")
    return lines
