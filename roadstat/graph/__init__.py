"""Road graph data model."""

from roadstat.graph.graph import (
    GraphBuilder,
    RoadGraph,
    UnknownLabelError,
    build_road_graph,
    road_graph_to_dict,
)

__all__ = [
    "GraphBuilder",
    "RoadGraph",
    "UnknownLabelError",
    "build_road_graph",
    "road_graph_to_dict",
]
