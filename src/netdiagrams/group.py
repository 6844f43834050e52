"""Named, nestable containers of nodes, edges and child groups."""
from __future__ import annotations

from typing import List, Optional

from .assets import AssetStager
from .dot import ROOT, DotGraph
from .edge import Edge
from .errors import DuplicateIdError, OwnershipError
from .node import Node
from .options import EdgeOption, GroupOption, GroupOptions, default_group_options

CLUSTER_PREFIX = "cluster_"


class Group:
    """A cluster of nodes.

    The group owns its nodes, edges and child groups; ``parent`` is only a
    back-reference. Builder methods return the group so calls can be chained.
    """

    def __init__(
        self,
        name: str,
        *opts: GroupOption,
        depth: int = 0,
        parent: Optional["Group"] = None,
    ) -> None:
        options = default_group_options(*opts)
        if not options.id:
            options.id = name
        if not options.label:
            options.label = name
        self.name = name
        self.options: GroupOptions = options
        self.depth = depth
        self.parent = parent
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._children: List[Group] = []

    @property
    def id(self) -> str:
        return self.options.id

    @property
    def label(self) -> str:
        return self.options.label

    @property
    def cluster_name(self) -> str:
        return CLUSTER_PREFIX + self.id

    def add(self, *nodes: Node) -> "Group":
        for node in nodes:
            if node.group is self:
                continue
            if node.group is not None:
                raise OwnershipError(
                    f'node "{node.id}" already belongs to group "{node.group.id}"'
                )
            node.group = self
            self._nodes.append(node)
        return self

    def _adopt(self, *nodes: Node) -> None:
        self.add(*(n for n in nodes if n.group is None))

    def connect(self, start: Node, end: Node, *opts: EdgeOption) -> "Group":
        self._adopt(start, end)
        return self.connect_by_id(start.id, end.id, *opts)

    def connect_by_id(self, start: str, end: str, *opts: EdgeOption) -> "Group":
        self._edges.append(Edge(start, end, *opts))
        return self

    def group(self, child: "Group") -> "Group":
        if child.parent is not None:
            raise OwnershipError(
                f'group "{child.id}" already belongs to group "{child.parent.id}"'
            )
        ancestor: Optional[Group] = self
        while ancestor is not None:
            if ancestor is child:
                raise OwnershipError(f'group "{child.id}" cannot be nested inside itself')
            ancestor = ancestor.parent
        if any(c.id == child.id for c in self._children):
            raise DuplicateIdError(f'group "{self.id}" already has a child group "{child.id}"')
        child.parent = self
        child._set_depth(self.depth + 1)
        self._children.append(child)
        return self

    def new_group(self, name: str, *opts: GroupOption) -> "Group":
        child = Group(name, *opts)
        self.group(child)
        return child

    def _set_depth(self, depth: int) -> None:
        self.depth = depth
        for child in self._children:
            child._set_depth(depth + 1)

    def nodes(self) -> List[Node]:
        out = list(self._nodes)
        for child in self._children:
            out.extend(child.nodes())
        return out

    def edges(self) -> List[Edge]:
        out = list(self._edges)
        for child in self._children:
            out.extend(child.edges())
        return out

    def children(self) -> List["Group"]:
        out: List[Group] = []
        for child in self._children:
            out.append(child)
            out.extend(child.children())
        return out

    def render_contents(self, scope: str, stager: AssetStager, graph: DotGraph) -> None:
        for node in self._nodes:
            node.render(scope, stager, graph)
        for edge in self._edges:
            edge.render(edge.start, edge.end, graph)
        for child in self._children:
            child.render(stager, graph, parent=scope)

    def render(self, stager: AssetStager, graph: DotGraph, *, parent: str = ROOT) -> None:
        graph.add_subgraph(parent, self.cluster_name, self.options.attrs(self.depth))
        self.render_contents(self.cluster_name, stager, graph)

    def __repr__(self) -> str:
        return f"Group(id={self.id!r}, depth={self.depth}, nodes={len(self._nodes)}, children={len(self._children)})"
