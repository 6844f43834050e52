"""In-memory Graphviz DOT model and its text serialization."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import DanglingReferenceError, DuplicateIdError

ROOT = "root"

_DOT_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def trim_attrs(attrs: Dict[str, str]) -> Dict[str, str]:
    """Drop attributes whose value is the empty string."""
    return {key: value for key, value in attrs.items() if value != ""}


def dot_quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _dot_key(key: str) -> str:
    return key if _DOT_ID_RE.match(key) else dot_quote(key)


def format_attrs(attrs: Dict[str, str]) -> str:
    items = sorted(trim_attrs(attrs).items())
    return ", ".join(f"{_dot_key(k)}={dot_quote(v)}" for k, v in items)


@dataclass
class _Scope:
    name: str
    attrs: Dict[str, str] = field(default_factory=dict)
    nodes: List[str] = field(default_factory=list)
    children: List["_Scope"] = field(default_factory=list)


class DotGraph:
    """Directed graph made of nested scopes (the root graph and cluster subgraphs).

    Nodes and subgraphs are declared inside a named scope. Edges are collected
    globally and written after every scope, in the order they were added; their
    endpoints are checked against the declared nodes when serializing.
    """

    def __init__(self, name: str = ROOT) -> None:
        self.name = name
        self._root = _Scope(name)
        self._scopes: Dict[str, _Scope] = {name: self._root}
        self._nodes: Dict[str, Dict[str, str]] = {}
        self._edges: List[Tuple[str, str, Dict[str, str]]] = []

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def _scope(self, name: str) -> _Scope:
        scope = self._scopes.get(name)
        if scope is None:
            raise DanglingReferenceError(f'unknown graph scope "{name}"')
        return scope

    def add_attrs(self, scope: str, attrs: Dict[str, str]) -> None:
        self._scope(scope).attrs.update(attrs)

    def add_subgraph(self, parent: str, name: str, attrs: Dict[str, str]) -> None:
        owner = self._scope(parent)
        if name in self._scopes:
            raise DuplicateIdError(f'subgraph "{name}" is declared twice')
        scope = _Scope(name, dict(attrs))
        owner.children.append(scope)
        self._scopes[name] = scope

    def add_node(self, parent: str, node_id: str, attrs: Dict[str, str]) -> None:
        owner = self._scope(parent)
        if self.has_node(node_id):
            raise DuplicateIdError(f'node "{node_id}" is declared twice')
        owner.nodes.append(node_id)
        self._nodes[node_id] = dict(attrs)

    def add_edge(self, src: str, dst: str, attrs: Dict[str, str]) -> None:
        self._edges.append((src, dst, dict(attrs)))

    def validate(self) -> None:
        for src, dst, _attrs in self._edges:
            for endpoint in (src, dst):
                if not self.has_node(endpoint):
                    raise DanglingReferenceError(
                        f'edge "{src}" -> "{dst}" references unknown node "{endpoint}"'
                    )

    def to_string(self) -> str:
        self.validate()
        lines: List[str] = [f"digraph {dot_quote(self.name)} {{"]
        self._emit_scope_body(self._root, lines, depth=1)
        for src, dst, attrs in self._edges:
            stmt = f"\t{dot_quote(src)} -> {dot_quote(dst)}"
            rendered = format_attrs(attrs)
            if rendered:
                stmt += f" [{rendered}]"
            lines.append(stmt + ";")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _emit_scope_body(self, scope: _Scope, lines: List[str], *, depth: int) -> None:
        indent = "\t" * depth
        graph_attrs = format_attrs(scope.attrs)
        if graph_attrs:
            lines.append(f"{indent}graph [{graph_attrs}];")
        for node_id in scope.nodes:
            stmt = f"{indent}{dot_quote(node_id)}"
            rendered = format_attrs(self._nodes[node_id])
            if rendered:
                stmt += f" [{rendered}]"
            lines.append(stmt + ";")
        for child in scope.children:
            lines.append(f"{indent}subgraph {dot_quote(child.name)} {{")
            self._emit_scope_body(child, lines, depth=depth + 1)
            lines.append(f"{indent}}}")

    def __str__(self) -> str:
        return self.to_string()
