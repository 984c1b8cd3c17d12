"""Pytest configuration and shared fixtures for DSG tests."""

import pytest

from dsg.core.scene_graph import (
    DynamicSceneGraph,
    RoomNode, PlaceNode, ObjectNode,
)


@pytest.fixture
def empty_graph():
    """Graph with no nodes or edges."""
    return DynamicSceneGraph(name="test_graph")


@pytest.fixture
def apartment():
    """One room holding two places, with two objects on the first place.

    Layout on the XZ plane:
        living_room  [-10, 10] x [-10, 10]
        sofa_area    [-6, -2]  x [-2, 2]
        desk_area    [2, 6]    x [-2, 2]
        cup, book    on sofa_area
    No edges are added.
    """
    graph = DynamicSceneGraph(name="apartment")

    graph.add_node(RoomNode(
        id="living_room", center=(0.0, 0.0, 0.0), extent=(20.0, 1.0, 20.0)
    ))
    graph.add_node(PlaceNode(
        id="sofa_area", center=(-4.0, 0.0, 0.0), extent=(4.0, 1.0, 4.0)
    ))
    graph.add_node(PlaceNode(
        id="desk_area", center=(4.0, 0.0, 0.0), extent=(4.0, 1.0, 4.0)
    ))
    graph.add_node(ObjectNode(
        id="cup", center=(-4.0, 0.5, 0.0), extent=(0.5, 0.5, 0.5)
    ))
    graph.add_node(ObjectNode(
        id="book", center=(-3.0, 0.5, 1.0), extent=(1.0, 0.2, 1.0)
    ))

    return graph
