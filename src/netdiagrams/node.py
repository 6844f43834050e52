"""Diagram nodes: a labelled icon with an identity."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional

from .assets import AssetStager, icon_path
from .dot import DotGraph
from .ids import random_string
from .options import NodeOption, NodeOptions, default_node_options

if TYPE_CHECKING:
    from .group import Group


def humanize(name: str) -> str:
    """Turn an icon name such as ``linux-general`` into ``Linux General``."""
    words = [w for w in re.split(r"[-_\s]+", name) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


class Node:
    """An icon node.

    The label falls back to the humanized icon name when none is given, and
    an empty label is trimmed from the DOT output like any other empty
    attribute. A node with neither a name nor a label therefore shows its id
    in Graphviz.
    """

    def __init__(self, provider: str = "", category: str = "", name: str = "", *opts: NodeOption) -> None:
        options = default_node_options(*opts)
        if not options.image and provider and category and name:
            options.image = icon_path(provider, category, name)
        if not options.id:
            options.id = random_string()
        if not options.label:
            options.label = humanize(name)

        self.provider = provider
        self.category = category
        self.name = name
        self.options: NodeOptions = options
        # Owning group, set by Group.add; never an ownership path.
        self.group: Optional["Group"] = None

    @property
    def id(self) -> str:
        return self.options.id

    @property
    def label(self) -> str:
        return self.options.label

    def render(self, parent: str, stager: AssetStager, graph: DotGraph) -> None:
        attrs = self.options.attrs()
        if self.options.image:
            attrs["image"] = stager.stage(self.options.image)
        graph.add_node(parent, self.id, attrs)

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, label={self.label!r}, image={self.options.image!r})"
