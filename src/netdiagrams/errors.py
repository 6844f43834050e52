"""Exception types raised while building and rendering diagrams."""
from __future__ import annotations

from typing import Optional


class NetDiagramsError(Exception):
    """Base error with a stable code for CLI mapping."""

    code = "E_DIAGRAM"

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnsupportedFormatError(NetDiagramsError, ValueError):
    """Raised when the requested output format is not dot/png/jpg/svg/pdf."""

    code = "E_FORMAT"

    def __init__(self, out_format: str) -> None:
        super().__init__(f"unsupported output format: {out_format}")
        self.out_format = out_format


class AssetError(NetDiagramsError):
    code = "E_ASSET"


class AssetNotFoundError(AssetError, LookupError):
    code = "E_ASSET_NOT_FOUND"


class RendererError(NetDiagramsError):
    """Raised when the Graphviz process cannot be spawned or exits non-zero."""

    code = "E_RENDERER"

    def __init__(self, message: str, *, returncode: Optional[int] = None, output: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class DanglingReferenceError(NetDiagramsError, LookupError):
    code = "E_DANGLING_REF"


class DuplicateIdError(NetDiagramsError, ValueError):
    code = "E_DUPLICATE_ID"


class OwnershipError(NetDiagramsError, ValueError):
    """Raised when a node or group is attached to a second parent."""

    code = "E_OWNERSHIP"


class DocumentError(NetDiagramsError, ValueError):
    code = "E_DOCUMENT"
