"""Graphviz invocation for image output."""
from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from .config import renderer_binary
from .errors import RendererError

LOG = logging.getLogger(__name__)

DOT_FORMAT = "dot"
IMAGE_FORMATS = ("png", "jpg", "svg", "pdf")


def render_image(dot_file: Path, out_file: Path, out_format: str, *, renderer: Optional[str] = None) -> Path:
    """Run ``<renderer> -T<format> -o <out_file> <dot_file>`` and return ``out_file``.

    Graphviz runs from the directory holding the DOT file so that relative
    ``image`` references to staged icons resolve. There is no timeout.
    """
    binary = renderer or renderer_binary()
    dot_file = Path(dot_file).resolve()
    out_file = Path(out_file).resolve()
    cmd = [shutil.which(binary) or binary, f"-T{out_format}", "-o", str(out_file), str(dot_file)]
    LOG.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(dot_file.parent),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise RendererError(f"failed to execute Graphviz ({binary}): {exc}") from exc

    output = proc.stdout or ""
    if proc.returncode != 0:
        raise RendererError(
            f"graphviz rendering failed: exit status {proc.returncode}: {output.strip()}",
            returncode=proc.returncode,
            output=output,
        )
    if not out_file.exists():
        raise RendererError(
            f"graphviz rendering produced no output file: {out_file}",
            returncode=proc.returncode,
            output=output,
        )
    if output.strip():
        LOG.debug("graphviz output: %s", output.strip())
    return out_file
