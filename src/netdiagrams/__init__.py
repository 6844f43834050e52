"""Public API for netdiagrams."""
from .diagram import Diagram
from .edge import Edge
from .errors import (
    AssetError,
    AssetNotFoundError,
    DanglingReferenceError,
    DocumentError,
    DuplicateIdError,
    NetDiagramsError,
    OwnershipError,
    RendererError,
    UnsupportedFormatError,
)
from .group import Group
from .node import Node
from .options import (
    bidirectional,
    default_edge_options,
    default_group_options,
    default_node_options,
    default_options,
    diagram_attribute,
    direction,
    edge_attribute,
    edge_color,
    edge_font_color,
    edge_label,
    edge_style,
    filename,
    forward,
    group_attribute,
    group_background_color,
    group_id,
    group_label,
    group_pen_color,
    label,
    name,
    node_attribute,
    node_font_color,
    node_id,
    node_image,
    node_label,
    node_shape,
    node_size,
    output_format,
    pad,
    reverse,
    splines,
)

__all__ = [
    "Diagram",
    "Edge",
    "Group",
    "Node",
    "NetDiagramsError",
    "AssetError",
    "AssetNotFoundError",
    "DanglingReferenceError",
    "DocumentError",
    "DuplicateIdError",
    "OwnershipError",
    "RendererError",
    "UnsupportedFormatError",
    "default_options",
    "default_group_options",
    "default_node_options",
    "default_edge_options",
    "name",
    "filename",
    "output_format",
    "label",
    "direction",
    "splines",
    "pad",
    "diagram_attribute",
    "group_id",
    "group_label",
    "group_background_color",
    "group_pen_color",
    "group_attribute",
    "node_id",
    "node_label",
    "node_shape",
    "node_image",
    "node_size",
    "node_font_color",
    "node_attribute",
    "edge_label",
    "edge_color",
    "edge_style",
    "edge_font_color",
    "edge_attribute",
    "forward",
    "reverse",
    "bidirectional",
]
