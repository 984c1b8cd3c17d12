"""Node authoring helpers.

Turns editor input into nodes: a rectangle dragged on the ground plane
for rooms and places, or a host bounds query for objects. Input problems
are logged and reported by returning None/False.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..enums import NodeKind, GraphError
from .containment import BoundsQuery
from .graph import DynamicSceneGraph
from .nodes import DSGNode, RoomNode, PlaceNode, ObjectNode, Vector3


logger = logging.getLogger(__name__)

# Areas are drawn on the y = 0 ground plane with a nominal height
DEFAULT_AREA_HEIGHT = 1.0


def range_to_box(start_point: Sequence[float], end_point: Sequence[float],
                 height: float = DEFAULT_AREA_HEIGHT) -> Tuple[Vector3, Vector3]:
    """Center and extent of the ground rectangle spanned by two corners."""
    start = np.asarray(start_point, dtype=float)
    end = np.asarray(end_point, dtype=float)
    center = (start + end) / 2.0
    size = np.abs(start - end)
    return (
        (float(center[0]), 0.0, float(center[2])),
        (float(size[0]), float(height), float(size[2])),
    )


def create_area_node(kind: NodeKind, node_id: str,
                     start_point: Optional[Sequence[float]],
                     end_point: Optional[Sequence[float]],
                     height: float = DEFAULT_AREA_HEIGHT) -> Optional[DSGNode]:
    """Create a room or place from a selected ground rectangle."""
    if kind not in (NodeKind.ROOM, NodeKind.PLACE):
        raise ValueError(f"Area nodes must be rooms or places, got {kind.value}")
    if not node_id:
        logger.error(f"{GraphError.EMPTY_IDENTIFIER.name}: node name cannot be empty")
        return None
    if start_point is None or end_point is None:
        logger.error(f"{GraphError.MISSING_SELECTION.name}: select a range "
                     f"before adding a {kind.value} node")
        return None

    center, extent = range_to_box(start_point, end_point, height)
    node_cls = RoomNode if kind == NodeKind.ROOM else PlaceNode
    return node_cls(id=node_id, center=center, extent=extent)


def create_object_node(node_id: str, scene_handle: Any,
                       bounds_query: BoundsQuery) -> Optional[ObjectNode]:
    """Create an object node from the host's world-space bounds."""
    if scene_handle is None:
        logger.error(f"{GraphError.MISSING_SELECTION.name}: select an object "
                     f"for the object node")
        return None
    if not node_id:
        logger.error(f"{GraphError.EMPTY_IDENTIFIER.name}: node name cannot be empty")
        return None

    center, extent = bounds_query(scene_handle)
    return ObjectNode(
        id=node_id,
        center=tuple(float(v) for v in center),
        extent=tuple(float(v) for v in extent),
        scene_handle=scene_handle,
    )


def add_authored_node(graph: Optional[DynamicSceneGraph], node: Optional[DSGNode]) -> bool:
    """Add an authored node, refusing a missing graph or empty identifier."""
    if graph is None:
        logger.error(f"{GraphError.MISSING_HOST.name}: no scene graph to add to")
        return False
    if node is None:
        return False
    if not node.id:
        logger.error(f"{GraphError.EMPTY_IDENTIFIER.name}: node name cannot be empty")
        return False

    graph.add_node(node)
    logger.info(f"{node.kind.value.capitalize()} node added to graph: {node.id}")
    return True
