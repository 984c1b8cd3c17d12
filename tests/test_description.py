"""Tests for connectivity audit and scene descriptions."""

import json
import logging
import os
import tempfile

import pytest

from dsg.core.scene_graph import (
    DynamicSceneGraph,
    RoomNode, PlaceNode, ObjectNode,
    DSGEdge,
    find_unconnected, connectivity_report,
    generate_description, SceneDescription,
    derive_containment_edges,
)
from dsg.utils.config import DSGConfig


@pytest.fixture
def described_graph():
    """Room R1 holding P1 with two objects, P1 walkable to P2."""
    graph = DynamicSceneGraph(name="described")
    graph.add_node(RoomNode(id="R1", center=(0, 0, 0), extent=(20, 1, 20)))
    graph.add_node(PlaceNode(id="P1", center=(-5, 0, 0), extent=(4, 1, 4)))
    graph.add_node(PlaceNode(id="P2", center=(5, 0, 0), extent=(4, 1, 4)))
    graph.add_node(ObjectNode(id="O1", center=(-5, 0.5, 0), extent=(1, 1, 1)))
    graph.add_node(ObjectNode(id="O2", center=(-4, 0.5, 1), extent=(1, 1, 1)))

    graph.add_edge(DSGEdge.containment("R1", "P1"))
    graph.add_edge(DSGEdge.containment("P1", "O1"))
    graph.add_edge(DSGEdge.containment("P1", "O2"))
    graph.add_edge(DSGEdge.traversability("P1", "P2"))
    return graph


class TestAudit:
    def test_lone_room_is_unconnected(self, empty_graph):
        room = RoomNode(id="R", center=(0, 0, 0), extent=(10, 1, 10))
        empty_graph.add_node(room)
        assert find_unconnected(empty_graph) == [room]

        place = PlaceNode(id="P", center=(0, 0, 0), extent=(2, 1, 2))
        empty_graph.add_node(place)
        empty_graph.add_edge(DSGEdge.containment("R", "P"))
        assert find_unconnected(empty_graph) == []

    def test_store_order(self, apartment):
        ids = [n.id for n in find_unconnected(apartment)]
        assert ids == ["living_room", "sofa_area", "desk_area", "cup", "book"]

    def test_after_derivation(self, apartment):
        derive_containment_edges(apartment)
        assert find_unconnected(apartment) == []

    def test_empty_graph(self, empty_graph):
        assert find_unconnected(empty_graph) == []
        assert connectivity_report(empty_graph) is True

    def test_report_logs_unconnected(self, apartment, caplog):
        with caplog.at_level(logging.INFO):
            assert connectivity_report(apartment) is False
        assert "kind: object, id: cup" in caplog.text

    def test_report_all_connected(self, described_graph, caplog):
        with caplog.at_level(logging.INFO):
            assert connectivity_report(described_graph) is True
        assert "All nodes are connected" in caplog.text

    def test_audit_is_read_only(self, described_graph):
        before = list(described_graph.edges)
        find_unconnected(described_graph)
        assert described_graph.edges == before


class TestDescription:
    def test_required_phrases(self, described_graph):
        text = generate_description(described_graph)
        assert "there are 2 objects, called (O1) and (O2)" in text
        assert "walking areas between [P1] and [P2] are interconnected." in text

    def test_full_text(self, described_graph):
        text = generate_description(described_graph)
        assert text == (
            "The house has the room that named {R1}. "
            "In {R1}, there is a place called [P1]. "
            "In [P1], there are 2 objects, called (O1) and (O2).\n"
            " The connectivity information between places is as follows: "
            "The walking areas between [P1] and [P2] are interconnected."
        )

    def test_empty_place_has_no_object_sentence(self, described_graph):
        described_graph.add_edge(DSGEdge.containment("R1", "P2"))
        text = generate_description(described_graph)

        assert "there is a place called [P2]." in text
        assert "In [P2]" not in text

    def test_single_object(self, described_graph):
        described_graph.remove_node(described_graph.get_node("O2"))
        text = generate_description(described_graph)
        assert "In [P1], there are 1 objects, called (O1)." in text

    def test_room_blocks_in_store_order(self, described_graph):
        described_graph.add_node(RoomNode(id="R0", center=(50, 0, 50), extent=(2, 1, 2)))
        text = generate_description(described_graph)
        assert text.index("{R1}") < text.index("{R0}")
        assert text.count("\n") == 2

    def test_empty_graph(self, empty_graph):
        text = generate_description(empty_graph)
        assert text == "The connectivity information between places is as follows: "

    def test_deterministic(self, described_graph):
        assert generate_description(described_graph) == generate_description(described_graph)


class TestSceneDescription:
    def test_envelope(self, described_graph):
        envelope = SceneDescription.from_graph(described_graph)
        data = json.loads(envelope.to_json())

        assert list(data.keys()) == ["description"]
        assert data["description"] == generate_description(described_graph)

    def test_save(self, described_graph):
        envelope = SceneDescription.from_graph(described_graph)
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            temp_path = f.name

        try:
            envelope.save(temp_path)
            with open(temp_path) as f:
                data = json.load(f)
            assert data == {"description": envelope.description}
        finally:
            os.unlink(temp_path)

    def test_save_from_config(self, described_graph, tmp_path):
        config = DSGConfig(description={"output_file": "scene.json", "json_indent": 4})
        envelope = SceneDescription.from_graph(described_graph)

        path = envelope.save_from_config(config, directory=tmp_path)

        assert path == tmp_path / "scene.json"
        text = path.read_text()
        assert text == envelope.to_json(indent=4)
        assert json.loads(text) == {"description": envelope.description}
