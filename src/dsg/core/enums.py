"""Core enumerations for the DSG library."""

from enum import Enum, auto


class NodeKind(Enum):
    """Kinds of nodes in the dynamic scene graph."""
    ROOM = "room"        # Rooms drawn as floor rectangles
    PLACE = "place"      # Walkable areas inside a room
    OBJECT = "object"    # Scene entities with host-computed bounds


class EdgeKind(Enum):
    """Kinds of edges in the dynamic scene graph."""
    CONTAINMENT = "containment"          # Directed: start holds end
    TRAVERSABILITY = "traversability"    # Undirected: places are walkable


class GraphError(Enum):
    """Reasons a graph or authoring operation was rejected."""
    INVALID_EDGE_KIND = auto()
    INVALID_CONTAINMENT = auto()
    DUPLICATE_EDGE = auto()
    UNKNOWN_NODE = auto()
    MISSING_HOST = auto()
    EMPTY_IDENTIFIER = auto()
    MISSING_SELECTION = auto()
