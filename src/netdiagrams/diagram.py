"""The diagram aggregate: a root group plus global options, rendered through Graphviz."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .assets import AssetStager
from .dot import ROOT, DotGraph
from .edge import Edge
from .errors import UnsupportedFormatError
from .group import Group
from .node import Node
from .options import DiagramOption, DiagramOptions, EdgeOption, GroupOption, default_options
from .renderer import DOT_FORMAT, IMAGE_FORMATS, render_image

LOG = logging.getLogger(__name__)


class Diagram:
    """Builder for a network diagram.

    Nodes, edges and groups added to the diagram land in its root group.
    ``render()`` always writes ``<name>/<file_name>.dot`` and, for png, jpg,
    svg or pdf output, runs Graphviz on it.
    """

    def __init__(self, *opts: DiagramOption) -> None:
        self.options: DiagramOptions = default_options(*opts)
        self._root = Group(ROOT)
        self._graph = self._new_graph()

    def _new_graph(self) -> DotGraph:
        graph = DotGraph(ROOT)
        graph.add_attrs(ROOT, self.options.attrs())
        return graph

    @property
    def root(self) -> Group:
        return self._root

    @property
    def output_dir(self) -> Path:
        return Path(self.options.name)

    @property
    def dot_path(self) -> Path:
        return self.output_dir / f"{self.options.file_name}.{DOT_FORMAT}"

    def set_output_path(self, path) -> None:
        """Override the output directory for rendered files."""
        self.options.name = str(path)

    def nodes(self) -> List[Node]:
        return self._root.nodes()

    def edges(self) -> List[Edge]:
        return self._root.edges()

    def groups(self) -> List[Group]:
        return self._root.children()

    def node(self, node_id: str) -> Optional[Node]:
        """Find a node anywhere in the diagram by id, or None."""
        for candidate in self.nodes():
            if candidate.id == node_id:
                return candidate
        return None

    def add(self, *nodes: Node) -> "Diagram":
        self._root.add(*nodes)
        return self

    def connect(self, start: Node, end: Node, *opts: EdgeOption) -> "Diagram":
        self._root.connect(start, end, *opts)
        return self

    def connect_by_id(self, start: str, end: str, *opts: EdgeOption) -> "Diagram":
        self._root.connect_by_id(start, end, *opts)
        return self

    def group(self, child: Group) -> "Diagram":
        self._root.group(child)
        return self

    def new_group(self, name: str, *opts: GroupOption) -> Group:
        return self._root.new_group(name, *opts)

    def source(self) -> str:
        """DOT text of the most recent render (only global attributes before one)."""
        return self._graph.to_string()

    def render(self) -> Path:
        """Render the diagram and return the path of the requested artifact."""
        outdir = self.output_dir
        outdir.mkdir(parents=True, exist_ok=True)

        self._graph = self._new_graph()
        stager = AssetStager(outdir)
        self._root.render_contents(ROOT, stager, self._graph)
        LOG.debug(
            "rendered %d nodes, %d edges, %d groups into %s",
            len(self.nodes()),
            len(self.edges()),
            len(self.groups()),
            outdir,
        )
        return self._render_output()

    def _render_output(self) -> Path:
        dot_file = self._save_dot()
        out_format = self.options.out_format
        if out_format == DOT_FORMAT:
            return dot_file.resolve()
        if out_format in IMAGE_FORMATS:
            out_file = self.output_dir / f"{self.options.file_name}.{out_format}"
            return render_image(dot_file, out_file, out_format)
        raise UnsupportedFormatError(out_format)

    def _save_dot(self) -> Path:
        text = self._graph.to_string()
        path = self.dot_path
        path.write_text(text, encoding="utf-8")
        LOG.debug("wrote %s (%d bytes)", path, len(text))
        return path

    def __repr__(self) -> str:
        return f"Diagram(name={self.options.name!r}, file_name={self.options.file_name!r}, format={self.options.out_format!r})"
