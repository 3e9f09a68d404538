"""
Edge-list ingestion: one undirected edge per line as two non-negative integer labels.
Lines starting with '#' and blank lines are skipped; any other malformed line aborts the build.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from roadstat.graph.graph import GraphBuilder, RoadGraph

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
DEFAULT_SOURCE = "<lines>"


class EdgeListFormatError(ValueError):
    """A non-comment line is not exactly two non-negative integer labels."""

    def __init__(self, message: str, line_number: int, line: str, source: str = DEFAULT_SOURCE) -> None:
        super().__init__(f"{source}:{line_number}: {message}: {line!r}")
        self.reason = message
        self.line_number = line_number
        self.line = line
        self.source = source


def _parse_label(token: str) -> int | None:
    # str.isdigit accepts non-ASCII digits that int() may not
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def parse_edge_line(
    line: str,
    line_number: int = 0,
    source: str = DEFAULT_SOURCE,
) -> tuple[int, int] | None:
    """
    Parse one line of an edge list.

    Returns:
        (label_a, label_b) for an edge line, None for a comment or blank line.

    Raises:
        EdgeListFormatError: wrong token count or a token that is not a non-negative integer.
    """
    text = line.rstrip("\r\n")
    if text.startswith(COMMENT_PREFIX):
        return None
    tokens = text.split()
    if not tokens:
        return None
    if len(tokens) != 2:
        raise EdgeListFormatError(
            f"expected 2 labels, got {len(tokens)}", line_number, text, source
        )
    labels = []
    for token in tokens:
        label = _parse_label(token)
        if label is None:
            raise EdgeListFormatError(
                f"invalid node label {token!r}", line_number, text, source
            )
        labels.append(label)
    return (labels[0], labels[1])


def iter_edges(lines: Iterable[str], source: str = DEFAULT_SOURCE) -> Iterator[tuple[int, int]]:
    """Yield (label_a, label_b) for each edge line; line numbers are 1-based."""
    for line_number, line in enumerate(lines, start=1):
        edge = parse_edge_line(line, line_number, source)
        if edge is not None:
            yield edge


def build_graph_from_lines(lines: Iterable[str], source: str = DEFAULT_SOURCE) -> RoadGraph:
    """
    Consume every line and build a RoadGraph. Each edge line adds exactly one edge.
    The first malformed line raises EdgeListFormatError and no graph is returned.
    """
    builder = GraphBuilder()
    for label_a, label_b in iter_edges(lines, source):
        builder.add_edge(label_a, label_b)
    graph = builder.build()
    logger.debug(
        "Built graph from %s: %d nodes, %d edges",
        source, graph.node_count, graph.edge_count,
    )
    return graph


def read_dataset(path: Path | str, encoding: str = "utf-8") -> RoadGraph:
    """
    Read an edge-list file into a RoadGraph.

    Raises:
        OSError: the file cannot be opened or read (e.g. FileNotFoundError)
        UnicodeDecodeError: the file is not valid text in the given encoding
        EdgeListFormatError: a malformed edge line
    """
    file_path = Path(path)
    logger.debug("Reading dataset %s", file_path)
    with file_path.open("r", encoding=encoding) as f:
        return build_graph_from_lines(f, source=str(file_path))
