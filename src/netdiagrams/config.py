"""Environment-driven settings, read at call time."""
from __future__ import annotations

import os

RENDERER_ENV = "NETDIAGRAMS_RENDERER"
DEBUG_ENV = "NETDIAGRAMS_DEBUG"

DEFAULT_RENDERER = "dot"


def renderer_binary() -> str:
    """Graphviz executable used for image output."""
    return os.getenv(RENDERER_ENV) or DEFAULT_RENDERER


def debug_enabled() -> bool:
    return os.getenv(DEBUG_ENV) == "1"
