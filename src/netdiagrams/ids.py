"""Random identifiers for nodes created without an explicit id."""
from __future__ import annotations

import random

CHARSET = "abcdefghijklmnopqrstuvwxyz"
DEFAULT_ID_LENGTH = 12


def random_string(length: int = DEFAULT_ID_LENGTH, charset: str = CHARSET) -> str:
    if length <= 0:
        raise ValueError(f"length must be > 0, got {length}")
    if not charset:
        raise ValueError("charset must not be empty")
    return "".join(random.choice(charset) for _ in range(length))
