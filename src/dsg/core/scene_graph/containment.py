"""Containment maintenance for the Dynamic Scene Graph.

Derives Room->Place and Place->Object containment edges from node
geometry, and re-homes objects onto the place they currently sit in
after they move.
"""

import logging
from typing import Any, Callable, Tuple

from ..enums import EdgeKind
from .edges import DSGEdge
from .geometry import contains_on_plane, overlap_fraction
from .graph import DynamicSceneGraph
from .nodes import DSGNode, Vector3


logger = logging.getLogger(__name__)

BoundsQuery = Callable[[Any], Tuple[Vector3, Vector3]]


def derive_containment_edges(graph: DynamicSceneGraph) -> int:
    """Add every containment edge implied by current geometry.

    For each place, links it to the objects it covers and to the rooms
    that fully contain it. Existing edges are never removed or
    duplicated, so running this twice on an unchanged graph adds nothing.

    Returns:
        Number of edges created
    """
    created = 0
    objects = graph.get_objects()
    rooms = graph.get_rooms()

    for place in graph.get_places():
        for obj in objects:
            if not overlap_fraction(place, obj, graph.overlap_threshold):
                continue
            if graph.edge_exists(place.id, obj.id, EdgeKind.CONTAINMENT):
                continue
            if graph.add_edge(DSGEdge.containment(place.id, obj.id)):
                created += 1

        for room in rooms:
            if not contains_on_plane(room, place):
                continue
            if graph.edge_exists(room.id, place.id, EdgeKind.CONTAINMENT):
                continue
            if graph.add_edge(DSGEdge.containment(room.id, place.id)):
                created += 1

    logger.info(f"Containment edges generated: {created} new")
    return created


def update_one(graph: DynamicSceneGraph, obj: DSGNode) -> bool:
    """Attach obj to the place that currently contains it.

    Any previous containment edge ending at obj is replaced. If no place
    covers obj, its last known containment is kept as is.

    Returns:
        True if obj was re-homed
    """
    place = graph.find_containing_place(obj)
    if place is None:
        logger.debug(f"No containing place for {obj.id}, keeping current containment")
        return False

    if graph.edge_exists(place.id, obj.id, EdgeKind.CONTAINMENT):
        return False

    stale = [e for e in graph.get_incoming_edges(obj.id, kind=EdgeKind.CONTAINMENT)
             if e.directed]
    for edge in stale:
        graph.remove_edge(edge)

    graph.add_edge(DSGEdge.containment(place.id, obj.id))
    previous = stale[0].start_id if stale else None
    logger.debug(f"Re-homed {obj.id}: {previous} -> {place.id}")
    return True


def update_all(graph: DynamicSceneGraph) -> int:
    """Run update_one over every object in store order.

    Returns:
        Number of objects re-homed
    """
    moved = sum(1 for obj in graph.get_objects() if update_one(graph, obj))
    if moved:
        logger.info(f"Re-homed {moved} object(s)")
    return moved


def refresh_object_bounds(graph: DynamicSceneGraph, bounds_query: BoundsQuery) -> int:
    """Re-query host bounds for every object with a scene handle, then re-home.

    Args:
        graph: Graph to update
        bounds_query: Host callable mapping a scene handle to (center, extent)

    Returns:
        Number of objects re-homed
    """
    for obj in graph.get_objects():
        handle = getattr(obj, "scene_handle", None)
        if handle is None:
            continue
        center, extent = bounds_query(handle)
        obj.update_geometry(center=center, extent=extent)
    return update_all(graph)
