"""Dynamic Scene Graph (DSG) module.

Represents a scene as a spatial hierarchy that stays consistent as
objects move.

Nodes: Rooms, Places, Objects (center + extent boxes)
Edges: Containment (Room->Place, Place->Object) and Traversability (Place<->Place)
"""

from .nodes import (
    DSGNode,
    RoomNode,
    PlaceNode,
    ObjectNode,
)

from .edges import DSGEdge

from .geometry import (
    Footprint,
    contains_on_plane,
    overlap_ratio,
    overlap_fraction,
)

from .graph import DynamicSceneGraph

from .containment import (
    derive_containment_edges,
    update_one,
    update_all,
    refresh_object_bounds,
)

from .audit import (
    find_unconnected,
    connectivity_report,
)

from .description import (
    generate_description,
    SceneDescription,
)

from .authoring import (
    range_to_box,
    create_area_node,
    create_object_node,
    add_authored_node,
)

__all__ = [
    # Node types
    "DSGNode",
    "RoomNode",
    "PlaceNode",
    "ObjectNode",
    # Edge types
    "DSGEdge",
    # Geometry
    "Footprint",
    "contains_on_plane",
    "overlap_ratio",
    "overlap_fraction",
    # Graph
    "DynamicSceneGraph",
    # Containment
    "derive_containment_edges",
    "update_one",
    "update_all",
    "refresh_object_bounds",
    # Audit
    "find_unconnected",
    "connectivity_report",
    # Description
    "generate_description",
    "SceneDescription",
    # Authoring
    "range_to_box",
    "create_area_node",
    "create_object_node",
    "add_authored_node",
]
