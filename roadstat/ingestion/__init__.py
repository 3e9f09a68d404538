"""Edge-list parsing and dataset loading."""

from roadstat.ingestion.edge_list import (
    COMMENT_PREFIX,
    EdgeListFormatError,
    build_graph_from_lines,
    iter_edges,
    parse_edge_line,
    read_dataset,
)

__all__ = [
    "COMMENT_PREFIX",
    "EdgeListFormatError",
    "build_graph_from_lines",
    "iter_edges",
    "parse_edge_line",
    "read_dataset",
]
