"""Connections between two node identifiers."""
from __future__ import annotations

from .dot import DotGraph
from .options import EdgeOption, EdgeOptions, default_edge_options


class Edge:
    def __init__(self, start: str, end: str, *opts: EdgeOption) -> None:
        self.start = start
        self.end = end
        self.options: EdgeOptions = default_edge_options(*opts)

    def render(self, start: str, end: str, graph: DotGraph) -> None:
        graph.add_edge(start, end, self.options.attrs())

    def __repr__(self) -> str:
        return f"Edge({self.start!r} -> {self.end!r}, dir={self.options.direction!r})"
