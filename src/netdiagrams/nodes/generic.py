"""Generic infrastructure icons: ``generic.network.firewall(node_label("fw"))``."""
from __future__ import annotations

from typing import Tuple

from ..node import Node
from ..options import NodeOption

PROVIDER = "generic"


class _Category:
    category = ""

    def _new(self, icon: str, opts: Tuple[NodeOption, ...]) -> Node:
        return Node(PROVIDER, self.category, icon, *opts)


class _Blank(_Category):
    category = "blank"

    def blank(self, *opts: NodeOption) -> Node:
        return self._new("blank", opts)


class _Compute(_Category):
    category = "compute"

    def rack(self, *opts: NodeOption) -> Node:
        return self._new("rack", opts)


class _Database(_Category):
    category = "database"

    def sql(self, *opts: NodeOption) -> Node:
        return self._new("sql", opts)


class _Device(_Category):
    category = "device"

    def mobile(self, *opts: NodeOption) -> Node:
        return self._new("mobile", opts)

    def tablet(self, *opts: NodeOption) -> Node:
        return self._new("tablet", opts)


class _Network(_Category):
    category = "network"

    def firewall(self, *opts: NodeOption) -> Node:
        return self._new("firewall", opts)

    def router(self, *opts: NodeOption) -> Node:
        return self._new("router", opts)

    def subnet(self, *opts: NodeOption) -> Node:
        return self._new("subnet", opts)

    def switch(self, *opts: NodeOption) -> Node:
        return self._new("switch", opts)

    def vpn(self, *opts: NodeOption) -> Node:
        return self._new("vpn", opts)


class _OS(_Category):
    category = "os"

    def android(self, *opts: NodeOption) -> Node:
        return self._new("android", opts)

    def centos(self, *opts: NodeOption) -> Node:
        return self._new("centos", opts)

    def debian(self, *opts: NodeOption) -> Node:
        return self._new("debian", opts)

    def ios(self, *opts: NodeOption) -> Node:
        return self._new("ios", opts)

    def linux_general(self, *opts: NodeOption) -> Node:
        return self._new("linux-general", opts)

    def raspbian(self, *opts: NodeOption) -> Node:
        return self._new("raspbian", opts)

    def red_hat(self, *opts: NodeOption) -> Node:
        return self._new("red-hat", opts)

    def suse(self, *opts: NodeOption) -> Node:
        return self._new("suse", opts)

    def ubuntu(self, *opts: NodeOption) -> Node:
        return self._new("ubuntu", opts)

    def windows(self, *opts: NodeOption) -> Node:
        return self._new("windows", opts)


class _Place(_Category):
    category = "place"

    def datacenter(self, *opts: NodeOption) -> Node:
        return self._new("datacenter", opts)


class _Storage(_Category):
    category = "storage"

    def storage(self, *opts: NodeOption) -> Node:
        return self._new("storage", opts)


class _Virtualization(_Category):
    category = "virtualization"

    def virtualbox(self, *opts: NodeOption) -> Node:
        return self._new("virtualbox", opts)

    def vmware(self, *opts: NodeOption) -> Node:
        return self._new("vmware", opts)

    def xen(self, *opts: NodeOption) -> Node:
        return self._new("xen", opts)


blank = _Blank()
compute = _Compute()
database = _Database()
device = _Device()
network = _Network()
os = _OS()
place = _Place()
storage = _Storage()
virtualization = _Virtualization()
