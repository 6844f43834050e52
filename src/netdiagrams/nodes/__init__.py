"""Node factories for the bundled icon providers."""
from . import generic

__all__ = ["generic"]
