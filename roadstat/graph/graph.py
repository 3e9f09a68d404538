"""
Undirected road graph: dense node indices, external label table, adjacency lists.
RoadGraph is immutable; GraphBuilder accumulates edges and freezes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


class UnknownLabelError(KeyError):
    """External label not present in the graph."""

    def __init__(self, label: int) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"Unknown node label: {self.label}"


@dataclass(frozen=True)
class RoadGraph:
    """
    Immutable undirected, unweighted graph.

    Node i has external label labels[i] and neighbor indices adjacency[i]
    (insertion order; parallel edges repeat, a self-loop is listed once).
    """

    labels: tuple[int, ...]
    adjacency: tuple[tuple[int, ...], ...]
    edge_count: int
    index_by_label: Mapping[int, int] = field(repr=False, compare=False)

    @property
    def node_count(self) -> int:
        return len(self.labels)

    def node_indices(self) -> range:
        return range(len(self.labels))

    def has_index(self, index: int) -> bool:
        return 0 <= index < len(self.labels)

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Neighbor indices of node index (order preserved)."""
        return self.adjacency[index]

    def degree(self, index: int) -> int:
        return len(self.adjacency[index])

    def index_of(self, label: int) -> int:
        """Internal index for an external label; UnknownLabelError if absent."""
        try:
            return self.index_by_label[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def label_of(self, index: int) -> int:
        return self.labels[index]

    def iter_edges(self) -> Iterator[tuple[int, int]]:
        """Each undirected edge once as (a, b) with a <= b, parallel edges repeated."""
        for a, neighbors in enumerate(self.adjacency):
            loops = 0
            for b in neighbors:
                if a < b:
                    yield (a, b)
                elif a == b:
                    loops += 1
            for _ in range(loops):
                yield (a, a)


class GraphBuilder:
    """
    Mutable accumulator for a RoadGraph.
    Labels get indices in first-occurrence order starting at 0; an index is never reassigned.
    """

    def __init__(self) -> None:
        self._labels: list[int] = []
        self._adjacency: list[list[int]] = []
        self._index_by_label: dict[int, int] = {}
        self._edge_count = 0

    @property
    def node_count(self) -> int:
        return len(self._labels)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_node(self, label: int) -> int:
        """Return the index for label, allocating the next one on first sight."""
        index = self._index_by_label.get(label)
        if index is None:
            index = len(self._labels)
            self._index_by_label[label] = index
            self._labels.append(label)
            self._adjacency.append([])
        return index

    def add_edge(self, label_a: int, label_b: int) -> tuple[int, int]:
        """Add one undirected edge between two labels; returns their indices."""
        a = self.add_node(label_a)
        b = self.add_node(label_b)
        self._adjacency[a].append(b)
        if a != b:
            self._adjacency[b].append(a)
        self._edge_count += 1
        return (a, b)

    def build(self) -> RoadGraph:
        return RoadGraph(
            labels=tuple(self._labels),
            adjacency=tuple(tuple(n) for n in self._adjacency),
            edge_count=self._edge_count,
            index_by_label=MappingProxyType(dict(self._index_by_label)),
        )


def build_road_graph(edges: Iterator[tuple[int, int]] | list[tuple[int, int]]) -> RoadGraph:
    """Build a RoadGraph from (label_a, label_b) pairs."""
    builder = GraphBuilder()
    for label_a, label_b in edges:
        builder.add_edge(label_a, label_b)
    return builder.build()


def road_graph_to_dict(g: RoadGraph) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Edges are listed once each as [a, b] with a <= b, sorted.
    """
    return {
        "node_count": g.node_count,
        "edge_count": g.edge_count,
        "labels": list(g.labels),
        "edges": [list(e) for e in sorted(g.iter_edges())],
    }
