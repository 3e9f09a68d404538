"""Analysis engine: components, degrees, distance-gap neighborhoods, bounded shortest paths."""

from roadstat.analysis.analyzer import GraphAnalyzer, analyze
from roadstat.analysis.components import (
    connected_component_sizes,
    count_connected_components,
)
from roadstat.analysis.degree import (
    count_high_degree_nodes,
    degree_distribution,
    node_degrees,
)
from roadstat.analysis.neighborhood import DistanceGapCounts, count_distance_gap_neighbors
from roadstat.analysis.report import AnalysisReport, render_report_text, report_to_dict
from roadstat.analysis.settings import (
    AnalysisSettings,
    default_settings,
    load_settings,
    settings_to_dict,
)
from roadstat.analysis.shortest_path import (
    StartNodeError,
    bounded_shortest_paths,
    resolve_start_node,
)

__all__ = [
    "AnalysisReport",
    "AnalysisSettings",
    "DistanceGapCounts",
    "GraphAnalyzer",
    "StartNodeError",
    "analyze",
    "bounded_shortest_paths",
    "connected_component_sizes",
    "count_connected_components",
    "count_distance_gap_neighbors",
    "count_high_degree_nodes",
    "default_settings",
    "degree_distribution",
    "load_settings",
    "node_degrees",
    "render_report_text",
    "report_to_dict",
    "resolve_start_node",
    "settings_to_dict",
]
