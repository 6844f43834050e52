"""Build diagrams from JSON documents.

A document is an object with optional diagram settings (``name``,
``filename``, ``format``, ``label``, ``direction``, ``attributes``) and
``nodes``, ``groups`` and ``edges`` lists::

    {
      "label": "Edge",
      "nodes": [{"id": "fw", "icon": "generic/network/firewall"}],
      "groups": [{"name": "core", "nodes": [{"id": "rt", "icon": "generic/network/router"}]}],
      "edges": [{"from": "fw", "to": "rt", "label": "10Gbps", "dir": "forward"}]
    }
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Set

from . import options as o
from .diagram import Diagram
from .errors import DocumentError
from .group import Group
from .node import Node

_DIRECTIONS = {
    "forward": o.forward,
    "reverse": o.reverse,
    "both": o.bidirectional,
}


def load_document(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DocumentError(f"failed to parse {path}: {exc}") from exc
    return parse_document(data)


def parse_document(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DocumentError(f"document must be a JSON object, got {type(data).__name__}")
    return data


def _str_map(value: Any, where: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DocumentError(f"{where}: attributes must be an object")
    return {str(k): str(v) for k, v in value.items()}


def _list(entry: Mapping[str, Any], key: str, where: str) -> List[Any]:
    value = entry.get(key, [])
    if not isinstance(value, list):
        raise DocumentError(f"{where}: {key!r} must be a list")
    return value


def _diagram_options(doc: Mapping[str, Any]) -> List[o.DiagramOption]:
    opts: List[o.DiagramOption] = []
    if "name" in doc:
        opts.append(o.name(str(doc["name"])))
    if "filename" in doc:
        opts.append(o.filename(str(doc["filename"])))
    if "format" in doc:
        opts.append(o.output_format(str(doc["format"])))
    if "label" in doc:
        opts.append(o.label(str(doc["label"])))
    if "direction" in doc:
        opts.append(o.direction(str(doc["direction"])))
    for key, value in _str_map(doc.get("attributes"), "diagram").items():
        opts.append(o.diagram_attribute(key, value))
    return opts


def _build_node(entry: Any, where: str, seen: Set[str]) -> Node:
    if not isinstance(entry, dict):
        raise DocumentError(f"{where}: node must be an object")
    icon = entry.get("icon")
    if not isinstance(icon, str) or len(icon.split("/")) != 3 or not all(icon.split("/")):
        raise DocumentError(f'{where}: "icon" must look like "<provider>/<category>/<name>"')
    provider, category, icon_name = icon.split("/")
    opts: List[o.NodeOption] = []
    if "id" in entry:
        node_id = str(entry["id"])
        if node_id in seen:
            raise DocumentError(f'{where}: duplicate node id "{node_id}"')
        seen.add(node_id)
        opts.append(o.node_id(node_id))
    if "label" in entry:
        opts.append(o.node_label(str(entry["label"])))
    for key, value in _str_map(entry.get("attributes"), where).items():
        opts.append(o.node_attribute(key, value))
    return Node(provider, category, icon_name, *opts)


def _edge_options(entry: Mapping[str, Any], where: str) -> List[o.EdgeOption]:
    opts: List[o.EdgeOption] = []
    direction = entry.get("dir", "forward")
    if not isinstance(direction, str) or direction not in _DIRECTIONS:
        raise DocumentError(f'{where}: "dir" must be one of forward, reverse, both')
    opts.append(_DIRECTIONS[direction]())
    if "label" in entry:
        opts.append(o.edge_label(str(entry["label"])))
    if "color" in entry:
        opts.append(o.edge_color(str(entry["color"])))
    if "style" in entry:
        opts.append(o.edge_style(str(entry["style"])))
    if "fontcolor" in entry:
        opts.append(o.edge_font_color(str(entry["fontcolor"])))
    for key, value in _str_map(entry.get("attributes"), where).items():
        opts.append(o.edge_attribute(key, value))
    return opts


def _connect_edges(target, entries: List[Any], where: str) -> None:
    for idx, entry in enumerate(entries):
        edge_where = f"{where}.edges[{idx}]"
        if not isinstance(entry, dict):
            raise DocumentError(f"{edge_where}: edge must be an object")
        start, end = entry.get("from"), entry.get("to")
        if not isinstance(start, str) or not isinstance(end, str):
            raise DocumentError(f'{edge_where}: "from" and "to" must be node ids')
        target.connect_by_id(start, end, *_edge_options(entry, edge_where))


def _build_group(entry: Any, where: str, seen: Set[str]) -> Group:
    if not isinstance(entry, dict):
        raise DocumentError(f"{where}: group must be an object")
    group_name = entry.get("name")
    if not isinstance(group_name, str) or not group_name:
        raise DocumentError(f'{where}: group needs a non-empty "name"')
    opts: List[o.GroupOption] = []
    if "label" in entry:
        opts.append(o.group_label(str(entry["label"])))
    if "background" in entry:
        opts.append(o.group_background_color(str(entry["background"])))
    for key, value in _str_map(entry.get("attributes"), where).items():
        opts.append(o.group_attribute(key, value))
    group = Group(group_name, *opts)
    for idx, node_spec in enumerate(_list(entry, "nodes", where)):
        group.add(_build_node(node_spec, f"{where}.nodes[{idx}]", seen))
    for idx, child_spec in enumerate(_list(entry, "groups", where)):
        group.group(_build_group(child_spec, f"{where}.groups[{idx}]", seen))
    _connect_edges(group, _list(entry, "edges", where), where)
    return group


def build_diagram(doc: Mapping[str, Any], *extra: o.DiagramOption) -> Diagram:
    """Create a Diagram from a parsed document; ``extra`` overrides apply last."""
    diagram = Diagram(*_diagram_options(doc), *extra)
    seen: Set[str] = set()
    for idx, node_spec in enumerate(_list(doc, "nodes", "document")):
        diagram.add(_build_node(node_spec, f"nodes[{idx}]", seen))
    for idx, group_spec in enumerate(_list(doc, "groups", "document")):
        diagram.group(_build_group(group_spec, f"groups[{idx}]", seen))
    _connect_edges(diagram, _list(doc, "edges", "document"), "document")
    return diagram
