"""
GraphAnalyzer: run degree, neighborhood, component and shortest-path analyses -> AnalysisReport.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from roadstat.graph.graph import RoadGraph

from roadstat.analysis.components import connected_component_sizes
from roadstat.analysis.degree import count_high_degree_nodes, degree_distribution
from roadstat.analysis.neighborhood import count_distance_gap_neighbors
from roadstat.analysis.report import AnalysisReport
from roadstat.analysis.settings import AnalysisSettings, load_settings
from roadstat.analysis.shortest_path import bounded_shortest_paths, resolve_start_node

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """Run the fixed analysis battery over one immutable RoadGraph."""

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self.settings = settings or AnalysisSettings()

    def analyze(self, graph: RoadGraph) -> AnalysisReport:
        """
        Build an AnalysisReport for graph.
        The start node is resolved before any analysis runs, so a bad start fails fast.
        With settings.parallel the analyses share the graph across worker threads.
        """
        s = self.settings
        start = resolve_start_node(graph, s.start_node, by_label=s.start_by_label)
        tasks = {
            "high_degree": (count_high_degree_nodes, (graph, s.degree_threshold)),
            "distance_gap": (count_distance_gap_neighbors, (graph, s.gap_threshold)),
            "components": (connected_component_sizes, (graph,)),
            "degrees": (degree_distribution, (graph,)),
            "paths": (bounded_shortest_paths, (graph, start, s.cutoff)),
        }

        if s.parallel:
            with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
                futures = {
                    name: executor.submit(fn, *args) for name, (fn, args) in tasks.items()
                }
                results = {name: f.result() for name, f in futures.items()}
        else:
            results = {}
            for name, (fn, args) in tasks.items():
                logger.debug("Running %s analysis", name)
                results[name] = fn(*args)

        sizes = results["components"]
        return AnalysisReport(
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            degree_threshold=s.degree_threshold,
            high_degree_count=results["high_degree"],
            gap_threshold=s.gap_threshold,
            distance_gap=results["distance_gap"],
            component_count=len(sizes),
            largest_component_size=sizes[0] if sizes else 0,
            degree_distribution=tuple(results["degrees"].items()),
            start_node=start,
            start_label=graph.label_of(start),
            start_by_label=s.start_by_label,
            cutoff=s.cutoff,
            shortest_paths=tuple(results["paths"]),
        )


def analyze(
    graph: RoadGraph,
    settings: AnalysisSettings | str | dict | None = None,
) -> AnalysisReport:
    """Convenience: run GraphAnalyzer(load_settings(settings)).analyze(graph)."""
    return GraphAnalyzer(load_settings(settings)).analyze(graph)
