"""Core enums and scene graph for the DSG library."""

from .enums import (
    NodeKind,
    EdgeKind,
    GraphError,
)

__all__ = [
    "NodeKind",
    "EdgeKind",
    "GraphError",
]
