"""Option dataclasses and the override functions applied on top of their defaults.

Every ``default_*_options`` helper builds a dataclass with documented defaults
and applies the given overrides in order, so the last override wins.  Values
are not validated here; Graphviz sees them verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple

DEFAULT_FONT_NAME = "Sans-Serif"
DEFAULT_FONT_COLOR = "#2D3436"
DEFAULT_EDGE_COLOR = "#7B8894"
DEFAULT_PEN_COLOR = "#AEB6BE"

# Cluster fill colors, cycled by nesting depth.
GROUP_BACKGROUND_COLORS: Tuple[str, ...] = ("#E5F5FD", "#EBF3E7", "#ECE8F6", "#FDF7E3")

# Extra node height per additional label line.
LABEL_LINE_HEIGHT = 0.4


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Font:
    name: str = DEFAULT_FONT_NAME
    size: float = 13.0
    color: str = DEFAULT_FONT_COLOR

    def attrs(self) -> Dict[str, str]:
        return {"fontname": self.name, "fontsize": _num(self.size), "fontcolor": self.color}


@dataclass
class DiagramOptions:
    """Diagram-wide settings.

    ``name`` is the output directory and ``file_name`` the base name of the
    written files; ``out_format`` is one of dot, png, jpg, svg or pdf.
    """

    name: str = "netdiagrams"
    file_name: str = "app"
    out_format: str = "dot"
    label: str = ""
    direction: str = "LR"
    pad: float = 2.0
    splines: str = "ortho"
    node_sep: float = 0.60
    rank_sep: float = 0.75
    font: Font = field(default_factory=lambda: Font(size=15.0))
    attributes: Dict[str, str] = field(default_factory=dict)

    def attrs(self) -> Dict[str, str]:
        out = {
            "label": self.label,
            "labelloc": "t",
            "rankdir": self.direction,
            "pad": _num(self.pad),
            "splines": self.splines,
            "nodesep": _num(self.node_sep),
            "ranksep": _num(self.rank_sep),
        }
        out.update(self.font.attrs())
        out.update(self.attributes)
        return out


@dataclass
class GroupOptions:
    id: str = ""
    label: str = ""
    label_justify: str = "l"
    pen_color: str = DEFAULT_PEN_COLOR
    shape: str = "box"
    style: str = "rounded"
    # Empty means "pick from GROUP_BACKGROUND_COLORS by depth".
    background_color: str = ""
    font: Font = field(default_factory=lambda: Font(size=12.0))
    attributes: Dict[str, str] = field(default_factory=dict)

    def attrs(self, depth: int) -> Dict[str, str]:
        bgcolor = self.background_color
        if not bgcolor:
            bgcolor = GROUP_BACKGROUND_COLORS[max(depth - 1, 0) % len(GROUP_BACKGROUND_COLORS)]
        out = {
            "label": self.label,
            "labeljust": self.label_justify,
            "pencolor": self.pen_color,
            "shape": self.shape,
            "style": self.style,
            "bgcolor": bgcolor,
        }
        out.update(self.font.attrs())
        out.update(self.attributes)
        return out


@dataclass
class NodeOptions:
    id: str = ""
    label: str = ""
    label_location: str = "b"
    shape: str = "none"
    image: str = ""
    width: float = 1.4
    height: float = 1.4
    fixed_size: bool = True
    image_scale: bool = True
    font: Font = field(default_factory=Font)
    attributes: Dict[str, str] = field(default_factory=dict)

    def attrs(self) -> Dict[str, str]:
        extra_lines = self.label.count("\n")
        out = {
            "label": self.label,
            "labelloc": self.label_location,
            "shape": self.shape,
            "width": _num(self.width),
            "height": _num(self.height + LABEL_LINE_HEIGHT * extra_lines),
            "fixedsize": str(self.fixed_size).lower(),
            "imagescale": str(self.image_scale).lower(),
        }
        out.update(self.font.attrs())
        out.update(self.attributes)
        return out


@dataclass
class EdgeOptions:
    label: str = ""
    color: str = DEFAULT_EDGE_COLOR
    style: str = ""
    font: Font = field(default_factory=Font)
    forward: bool = False
    reverse: bool = False
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def direction(self) -> str:
        if self.forward and self.reverse:
            return "both"
        if self.reverse:
            return "back"
        return "forward"

    def attrs(self) -> Dict[str, str]:
        out = {
            "label": self.label,
            "color": self.color,
            "style": self.style,
            "dir": self.direction,
        }
        out.update(self.font.attrs())
        out.update(self.attributes)
        return out


DiagramOption = Callable[[DiagramOptions], None]
GroupOption = Callable[[GroupOptions], None]
NodeOption = Callable[[NodeOptions], None]
EdgeOption = Callable[[EdgeOptions], None]


def default_options(*opts: DiagramOption) -> DiagramOptions:
    options = DiagramOptions()
    for opt in opts:
        opt(options)
    return options


def default_group_options(*opts: GroupOption) -> GroupOptions:
    options = GroupOptions()
    for opt in opts:
        opt(options)
    return options


def default_node_options(*opts: NodeOption) -> NodeOptions:
    options = NodeOptions()
    for opt in opts:
        opt(options)
    return options


def default_edge_options(*opts: EdgeOption) -> EdgeOptions:
    options = EdgeOptions()
    for opt in opts:
        opt(options)
    return options


# -- diagram overrides -------------------------------------------------------


def name(value: str) -> DiagramOption:
    """Set the output directory."""

    def apply(o: DiagramOptions) -> None:
        o.name = value

    return apply


def filename(value: str) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.file_name = value

    return apply


def output_format(value: str) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.out_format = value

    return apply


def label(value: str) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.label = value

    return apply


def direction(value: str) -> DiagramOption:
    """Set the Graphviz rankdir (LR, RL, TB or BT)."""

    def apply(o: DiagramOptions) -> None:
        o.direction = value

    return apply


def splines(value: str) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.splines = value

    return apply


def pad(value: float) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.pad = value

    return apply


def diagram_attribute(key: str, value: str) -> DiagramOption:
    def apply(o: DiagramOptions) -> None:
        o.attributes[key] = value

    return apply


# -- group overrides ---------------------------------------------------------


def group_id(value: str) -> GroupOption:
    def apply(o: GroupOptions) -> None:
        o.id = value

    return apply


def group_label(value: str) -> GroupOption:
    def apply(o: GroupOptions) -> None:
        o.label = value

    return apply


def group_background_color(value: str) -> GroupOption:
    def apply(o: GroupOptions) -> None:
        o.background_color = value

    return apply


def group_pen_color(value: str) -> GroupOption:
    def apply(o: GroupOptions) -> None:
        o.pen_color = value

    return apply


def group_attribute(key: str, value: str) -> GroupOption:
    def apply(o: GroupOptions) -> None:
        o.attributes[key] = value

    return apply


# -- node overrides ----------------------------------------------------------


def node_id(value: str) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.id = value

    return apply


def node_label(value: str) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.label = value

    return apply


def node_shape(value: str) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.shape = value

    return apply


def node_image(value: str) -> NodeOption:
    """Use another bundled icon, given as ``<provider>/<category>/<icon>.png``."""

    def apply(o: NodeOptions) -> None:
        o.image = value

    return apply


def node_size(width: float, height: float) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.width = width
        o.height = height

    return apply


def node_font_color(value: str) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.font.color = value

    return apply


def node_attribute(key: str, value: str) -> NodeOption:
    def apply(o: NodeOptions) -> None:
        o.attributes[key] = value

    return apply


# -- edge overrides ----------------------------------------------------------


def edge_label(value: str) -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.label = value

    return apply


def edge_color(value: str) -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.color = value

    return apply


def edge_style(value: str) -> EdgeOption:
    """Set the line style (solid, dashed, dotted, bold, ...)."""

    def apply(o: EdgeOptions) -> None:
        o.style = value

    return apply


def edge_font_color(value: str) -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.font.color = value

    return apply


def edge_attribute(key: str, value: str) -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.attributes[key] = value

    return apply


def forward() -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.forward = True

    return apply


def reverse() -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.reverse = True

    return apply


def bidirectional() -> EdgeOption:
    def apply(o: EdgeOptions) -> None:
        o.forward = True
        o.reverse = True

    return apply
