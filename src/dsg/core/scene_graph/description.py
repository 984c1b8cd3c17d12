"""Natural-language description of the Dynamic Scene Graph.

Walks rooms, their places and the objects in each place, then lists
which places are connected by walkable areas. The text is wrapped in a
single-field JSON envelope for downstream consumers.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from ..enums import EdgeKind, NodeKind
from .graph import DynamicSceneGraph
from .nodes import DSGNode


logger = logging.getLogger(__name__)

CONNECTIVITY_PREFIX = "The connectivity information between places is as follows: "


def _object_sentence(place_id: str, objects: List[DSGNode]) -> str:
    names = " and ".join(f"({o.id})" for o in objects)
    return f"In [{place_id}], there are {len(objects)} objects, called {names}."


def generate_description(graph: DynamicSceneGraph) -> str:
    """Describe rooms, places, objects and place connectivity."""
    rooms = graph.get_rooms()
    room_places: Dict[str, List[DSGNode]] = {r.id: [] for r in rooms}
    place_objects: Dict[str, List[DSGNode]] = {p.id: [] for p in graph.get_places()}
    walkways: List[str] = []

    for edge in graph.edges:
        if edge.kind == EdgeKind.CONTAINMENT:
            end = graph.get_node(edge.end_id)
            if end is None:
                continue
            if edge.start_id in room_places:
                room_places[edge.start_id].append(end)
            elif edge.start_id in place_objects:
                place_objects[edge.start_id].append(end)
        elif edge.kind == EdgeKind.TRAVERSABILITY:
            walkways.append(
                f"The walking areas between [{edge.start_id}] and "
                f"[{edge.end_id}] are interconnected."
            )

    blocks = []
    for room in rooms:
        sentences = [f"The house has the room that named {{{room.id}}}."]
        for place in room_places[room.id]:
            sentences.append(f"In {{{room.id}}}, there is a place called [{place.id}].")
            objects = place_objects.get(place.id, []) if place.kind == NodeKind.PLACE else []
            if objects:
                sentences.append(_object_sentence(place.id, objects))
        blocks.append(" ".join(sentences) + "\n")

    blocks.append(CONNECTIVITY_PREFIX + " ".join(walkways))
    return " ".join(blocks)


@dataclass
class SceneDescription:
    """JSON envelope holding the generated description."""
    description: str

    @classmethod
    def from_graph(cls, graph: DynamicSceneGraph) -> "SceneDescription":
        return cls(description=generate_description(graph))

    def to_dict(self) -> Dict[str, str]:
        return {"description": self.description}

    def to_json(self, indent: int = 2) -> str:
        """Serialize envelope to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Union[str, Path], indent: int = 2) -> None:
        """Save envelope to JSON file."""
        with open(path, 'w') as f:
            f.write(self.to_json(indent=indent))
        logger.info(f"Scene description saved to {path}")

    def save_from_config(self, config, directory: Union[str, Path] = ".") -> Path:
        """Save envelope using the file name and indent of a DSGConfig."""
        path = Path(directory) / config.description.output_file
        self.save(path, indent=config.description.json_indent)
        return path
