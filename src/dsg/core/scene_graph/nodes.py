"""Node types for the Dynamic Scene Graph.

Nodes represent the spatial hierarchy of a scene: Rooms contain Places,
Places contain Objects. Every node is an axis-aligned box given by a
center and an extent in world space.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, Tuple

from ..enums import NodeKind
from .geometry import Footprint


Vector3 = Tuple[float, float, float]
Quaternion = Tuple[float, float, float, float]

IDENTITY_ROTATION: Quaternion = (1.0, 0.0, 0.0, 0.0)


@dataclass(eq=False)
class DSGNode:
    """Base class for all scene graph nodes.

    Attributes:
        id: Node identifier (scene object name, room name, ...)
        kind: ROOM, PLACE or OBJECT
        center: (x, y, z) center of the node's box in world frame
        extent: (sx, sy, sz) full size of the box
        rotation: (w, x, y, z) orientation, carried for external consumers
        metadata: Additional host metadata
        last_updated: Timestamp of last geometry change
    """
    id: str
    kind: NodeKind = NodeKind.OBJECT  # Overridden in subclasses
    center: Vector3 = (0.0, 0.0, 0.0)
    extent: Vector3 = (1.0, 1.0, 1.0)
    rotation: Quaternion = IDENTITY_ROTATION
    metadata: Dict[str, Any] = field(default_factory=dict)
    last_updated: datetime = field(default_factory=datetime.now)

    @property
    def footprint(self) -> Footprint:
        """Horizontal footprint of this node."""
        return Footprint.from_box(self.center, self.extent)

    def update_geometry(self, center: Optional[Vector3] = None,
                        extent: Optional[Vector3] = None) -> None:
        """Move and/or resize the node."""
        if center is not None:
            self.center = tuple(float(v) for v in center)
        if extent is not None:
            self.extent = tuple(float(v) for v in extent)
        self.last_updated = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize node to dictionary."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "center": self.center,
            "extent": self.extent,
            "rotation": self.rotation,
            "metadata": self.metadata,
            "last_updated": self.last_updated.isoformat(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, center={self.center}, extent={self.extent})"


@dataclass(eq=False)
class RoomNode(DSGNode):
    """A room, authored as a rectangle on the ground plane."""

    def __post_init__(self):
        self.kind = NodeKind.ROOM


@dataclass(eq=False)
class PlaceNode(DSGNode):
    """A walkable place inside a room."""

    def __post_init__(self):
        self.kind = NodeKind.PLACE


@dataclass(eq=False)
class ObjectNode(DSGNode):
    """A scene entity whose box comes from the host's bounds query.

    Additional attributes:
        scene_handle: Opaque host handle passed back to the bounds query
    """
    scene_handle: Any = None

    def __post_init__(self):
        self.kind = NodeKind.OBJECT

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["has_scene_handle"] = self.scene_handle is not None
        return data
