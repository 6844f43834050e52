"""Bundled icon store and staging of icons into an output directory.

Icons live in the package under ``assets/<provider>/<category>/<icon>.png``
and are addressed by the path below ``assets/``.
"""
from __future__ import annotations

import io
import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Set

from PIL import Image

from .errors import AssetError, AssetNotFoundError

LOG = logging.getLogger(__name__)

ASSET_DIR = "assets"
ICON_EXTENSION = ".png"


def icon_path(provider: str, category: str, icon: str) -> str:
    return f"{provider}/{category}/{icon}{ICON_EXTENSION}"


def _asset_root():
    return resources.files(__package__).joinpath(ASSET_DIR)


def read_icon(path: str) -> bytes:
    parts = path.split("/")
    if any(part in ("", ".", "..") for part in parts):
        raise AssetNotFoundError(f"invalid icon path: {path!r}")
    entry = _asset_root()
    for part in parts:
        entry = entry.joinpath(part)
    if not entry.is_file():
        raise AssetNotFoundError(f"icon not found: {path}")
    data = entry.read_bytes()
    _verify_image(path, data)
    return data


def _verify_image(path: str, data: bytes) -> None:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except Exception as exc:
        raise AssetError(f"icon is not a readable image: {path}") from exc


def list_icons(provider: Optional[str] = None) -> List[str]:
    root = _asset_root()
    if provider is not None:
        root = root.joinpath(provider)
        if not root.is_dir():
            return []
    found: List[str] = []
    stack = [(root, provider or "")]
    while stack:
        entry, prefix = stack.pop()
        for child in entry.iterdir():
            rel = f"{prefix}/{child.name}" if prefix else child.name
            if child.is_dir():
                stack.append((child, rel))
            elif child.name.endswith(ICON_EXTENSION):
                found.append(rel)
    return sorted(found)


class AssetStager:
    """Copies icons into an output directory, once per distinct icon."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self._staged: Set[str] = set()

    @property
    def staged(self) -> List[str]:
        return sorted(self._staged)

    def stage(self, path: str) -> str:
        """Write the icon if needed and return its reference relative to the output dir."""
        ref = f"{ASSET_DIR}/{path}"
        if path in self._staged:
            return ref
        data = read_icon(path)
        target = self.output_dir / ASSET_DIR / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        self._staged.add(path)
        LOG.debug("staged icon %s -> %s", path, target)
        return ref
