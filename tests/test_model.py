from __future__ import annotations

import re
import sys
import tempfile
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import netdiagrams as nd
from netdiagrams.assets import AssetStager, list_icons, read_icon
from netdiagrams.dot import DotGraph, dot_quote, format_attrs
from netdiagrams.ids import CHARSET, DEFAULT_ID_LENGTH, random_string
from netdiagrams.node import humanize
from netdiagrams.nodes import generic


class IdsTests(unittest.TestCase):
    def test_random_string_charset_and_length(self) -> None:
        for _ in range(50):
            value = random_string()
            self.assertEqual(len(value), DEFAULT_ID_LENGTH)
            self.assertTrue(set(value) <= set(CHARSET))

    def test_custom_length_and_charset(self) -> None:
        self.assertEqual(random_string(3, "x"), "xxx")

    def test_rejects_empty(self) -> None:
        with self.assertRaises(ValueError):
            random_string(0)
        with self.assertRaises(ValueError):
            random_string(4, "")


class NodeTests(unittest.TestCase):
    def test_generated_id_and_default_label(self) -> None:
        node = generic.network.firewall()
        self.assertRegex(node.id, rf"^[a-z]{{{DEFAULT_ID_LENGTH}}}$")
        self.assertEqual(node.label, "Firewall")
        self.assertEqual(node.options.image, "generic/network/firewall.png")

    def test_explicit_id_and_label(self) -> None:
        node = generic.network.router(nd.node_id("core-rt"), nd.node_label("Core"))
        self.assertEqual(node.id, "core-rt")
        self.assertEqual(node.label, "Core")

    def test_humanize(self) -> None:
        self.assertEqual(humanize("linux-general"), "Linux General")
        self.assertEqual(humanize("red_hat"), "Red Hat")
        self.assertEqual(humanize(""), "")

    def test_empty_label_falls_back_then_trims(self) -> None:
        self.assertEqual(generic.network.router(nd.node_label("")).label, "Router")
        bare = nd.Node("", "", "", nd.node_id("bare"))
        self.assertEqual(bare.label, "")
        with tempfile.TemporaryDirectory() as td:
            graph = DotGraph()
            bare.render("root", AssetStager(Path(td)), graph)
            text = graph.to_string()
        line = next(ln for ln in text.splitlines() if ln.startswith('\t"bare" ['))
        self.assertNotRegex(line, r"\blabel=")
        self.assertNotIn("image=", line)

    def test_every_catalogue_icon_is_bundled(self) -> None:
        icons = set(list_icons("generic"))
        factories = [
            generic.blank.blank, generic.compute.rack, generic.database.sql,
            generic.device.mobile, generic.device.tablet,
            generic.network.firewall, generic.network.router, generic.network.subnet,
            generic.network.switch, generic.network.vpn,
            generic.os.android, generic.os.centos, generic.os.debian, generic.os.ios,
            generic.os.linux_general, generic.os.raspbian, generic.os.red_hat,
            generic.os.suse, generic.os.ubuntu, generic.os.windows,
            generic.place.datacenter, generic.storage.storage,
            generic.virtualization.virtualbox, generic.virtualization.vmware,
            generic.virtualization.xen,
        ]
        for factory in factories:
            with self.subTest(factory.__name__):
                self.assertIn(factory().options.image, icons)


class AssetTests(unittest.TestCase):
    def test_read_icon_returns_png_bytes(self) -> None:
        data = read_icon("generic/network/switch.png")
        self.assertTrue(data.startswith(b"\x89PNG\r\n\x1a\n"))

    def test_missing_icon(self) -> None:
        with self.assertRaises(nd.AssetNotFoundError):
            read_icon("generic/network/nope.png")
        with self.assertRaises(nd.AssetNotFoundError):
            read_icon("../netdiagrams/dot.py")

    def test_stager_writes_each_icon_once(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            stager = AssetStager(Path(td))
            ref = stager.stage("generic/network/router.png")
            self.assertEqual(ref, "assets/generic/network/router.png")
            target = Path(td) / ref
            self.assertTrue(target.exists())
            target.write_bytes(b"sentinel")
            self.assertEqual(stager.stage("generic/network/router.png"), ref)
            self.assertEqual(target.read_bytes(), b"sentinel")
            self.assertEqual(stager.staged, ["generic/network/router.png"])


class DotGraphTests(unittest.TestCase):
    def test_quote_escapes(self) -> None:
        self.assertEqual(dot_quote('a "b"'), '"a \\"b\\""')
        self.assertEqual(dot_quote("two\nlines"), '"two\\nlines"')

    def test_format_attrs_sorted_and_trimmed(self) -> None:
        self.assertEqual(format_attrs({"z": "1", "a": "2", "label": ""}), 'a="2", z="1"')

    def test_subgraph_and_edges(self) -> None:
        graph = DotGraph("root")
        graph.add_attrs("root", {"rankdir": "LR"})
        graph.add_subgraph("root", "cluster_core", {"label": "Core"})
        graph.add_node("cluster_core", "a", {"label": "A"})
        graph.add_node("root", "b", {})
        graph.add_edge("a", "b", {"dir": "forward", "style": ""})
        text = graph.to_string()
        self.assertTrue(text.startswith('digraph "root" {'))
        self.assertIn('subgraph "cluster_core" {', text)
        self.assertIn('\t\t"a" [label="A"];', text)
        self.assertIn('\t"a" -> "b" [dir="forward"];', text)
        self.assertNotIn("style=", text)

    def test_dangling_edge_rejected(self) -> None:
        graph = DotGraph()
        graph.add_node("root", "a", {})
        graph.add_edge("a", "ghost", {})
        with self.assertRaises(nd.DanglingReferenceError) as ctx:
            graph.to_string()
        self.assertIn("ghost", str(ctx.exception))

    def test_duplicates_rejected(self) -> None:
        graph = DotGraph()
        graph.add_node("root", "a", {})
        with self.assertRaises(nd.DuplicateIdError):
            graph.add_node("root", "a", {})
        graph.add_subgraph("root", "cluster_x", {})
        with self.assertRaises(nd.DuplicateIdError):
            graph.add_subgraph("root", "cluster_x", {})

    def test_unknown_scope_rejected(self) -> None:
        graph = DotGraph()
        with self.assertRaises(nd.DanglingReferenceError):
            graph.add_node("cluster_missing", "a", {})

    def test_has_node_tracks_declared_nodes(self) -> None:
        graph = DotGraph()
        graph.add_subgraph("root", "cluster_x", {})
        graph.add_node("cluster_x", "inner", {})
        self.assertTrue(graph.has_node("inner"))
        self.assertFalse(graph.has_node("cluster_x"))
        graph.add_edge("inner", "later", {})
        graph.add_node("root", "later", {})
        self.assertIn('\t"inner" -> "later";', graph.to_string())


class GroupTests(unittest.TestCase):
    def test_depth_follows_nesting(self) -> None:
        outer = nd.Group("outer")
        inner = outer.new_group("inner")
        leaf = nd.Group("leaf")
        inner.group(leaf)
        self.assertEqual((outer.depth, inner.depth, leaf.depth), (0, 1, 2))
        self.assertIs(leaf.parent, inner)

        d = nd.Diagram()
        d.group(outer)
        self.assertEqual((outer.depth, inner.depth, leaf.depth), (1, 2, 3))

    def test_recursive_accessors(self) -> None:
        g = nd.Group("g")
        a, b, c = generic.network.router(), generic.network.switch(), generic.network.vpn()
        child = g.new_group("child")
        g.connect(a, b)
        child.add(c)
        child.connect_by_id(b.id, c.id)
        self.assertEqual([n.id for n in g.nodes()], [a.id, b.id, c.id])
        self.assertEqual(len(g.edges()), 2)
        self.assertEqual(g.children(), [child])

    def test_add_is_idempotent_but_exclusive(self) -> None:
        g1, g2 = nd.Group("one"), nd.Group("two")
        node = generic.compute.rack()
        g1.add(node, node)
        self.assertEqual(g1.nodes(), [node])
        self.assertIs(node.group, g1)
        with self.assertRaises(nd.OwnershipError):
            g2.add(node)

    def test_connect_keeps_existing_owner(self) -> None:
        g = nd.Group("g")
        d = nd.Diagram()
        fw = generic.network.firewall()
        g.add(fw)
        d.group(g)
        sw = generic.network.switch()
        d.connect(fw, sw)
        self.assertIs(fw.group, g)
        self.assertIs(sw.group, d.root)

    def test_group_attachment_errors(self) -> None:
        parent = nd.Group("parent")
        parent.new_group("dup")
        with self.assertRaises(nd.DuplicateIdError):
            parent.group(nd.Group("dup"))
        child = parent.new_group("child")
        with self.assertRaises(nd.OwnershipError):
            nd.Group("other").group(child)
        with self.assertRaises(nd.OwnershipError):
            child.group(parent)

    def test_diagram_node_lookup_spans_groups(self) -> None:
        d = nd.Diagram()
        top = generic.network.firewall(nd.node_id("fw"))
        deep = generic.compute.rack(nd.node_id("srv"))
        d.add(top)
        d.new_group("core").new_group("rack").add(deep)
        self.assertIs(d.node("fw"), top)
        self.assertIs(d.node("srv"), deep)
        self.assertIsNone(d.node("missing"))

    def test_label_and_id_overrides(self) -> None:
        g = nd.Group("dmz", nd.group_id("zone1"), nd.group_label("DMZ"))
        self.assertEqual(g.id, "zone1")
        self.assertEqual(g.label, "DMZ")
        self.assertEqual(g.cluster_name, "cluster_zone1")

    def test_render_order_nodes_edges_children(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            g = nd.Group("site")
            a = generic.network.router(nd.node_id("a"))
            b = generic.network.switch(nd.node_id("b"))
            g.connect(a, b, nd.edge_label("uplink"))
            g.new_group("rack").add(generic.compute.rack(nd.node_id("c")))
            graph = DotGraph()
            g.render(AssetStager(Path(td)), graph)
            text = graph.to_string()
        lines = text.splitlines()
        site = lines.index('\tsubgraph "cluster_site" {')
        rack = lines.index('\t\tsubgraph "cluster_rack" {')
        node_a = next(i for i, ln in enumerate(lines) if ln.startswith('\t\t"a" ['))
        node_c = next(i for i, ln in enumerate(lines) if ln.startswith('\t\t\t"c" ['))
        self.assertLess(site, node_a)
        self.assertLess(node_a, rack)
        self.assertLess(rack, node_c)
        self.assertTrue(re.search(r'^\t"a" -> "b" \[.*label="uplink"', text, re.MULTILINE))


if __name__ == "__main__":
    unittest.main()
