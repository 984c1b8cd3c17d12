"""Dynamic Scene Graph store.

The DynamicSceneGraph owns every node and edge of a scene. Nodes and
edges keep their insertion order, which drives deterministic output
in descriptions and audits.
"""

import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from ..enums import NodeKind, EdgeKind, GraphError
from .nodes import DSGNode, RoomNode, PlaceNode, ObjectNode
from .edges import DSGEdge
from .geometry import OVERLAP_THRESHOLD, overlap_fraction


logger = logging.getLogger(__name__)


class DynamicSceneGraph:
    """Typed scene graph of Rooms, Places and Objects.

    Containment edges point from a container to what it holds
    (Room->Place, Place->Object). Traversability edges link Places that
    can be walked between. Node ids are expected to be unique; the store
    does not enforce it.

    The graph is not thread-safe. Hosts that mutate it from several
    places must serialize access themselves.
    """

    def __init__(self, name: str = "default",
                 overlap_threshold: float = OVERLAP_THRESHOLD):
        """Initialize empty scene graph.

        Args:
            name: Name identifier for this graph
            overlap_threshold: Fraction of an object's footprint a place
                must cover to contain it
        """
        self.name = name
        self.overlap_threshold = overlap_threshold
        self._nodes: List[DSGNode] = []
        self._edges: List[DSGEdge] = []
        self.created_at = datetime.now()
        self.last_updated = datetime.now()

    @classmethod
    def from_config(cls, config, name: str = "default") -> "DynamicSceneGraph":
        """Create a graph using the geometry settings of a DSGConfig."""
        return cls(name=name, overlap_threshold=config.geometry.overlap_threshold)

    # =========================================================================
    # Node Operations
    # =========================================================================

    def add_node(self, node: DSGNode) -> None:
        """Append a node to the graph."""
        self._nodes.append(node)
        self.last_updated = datetime.now()
        logger.debug(f"Added node: {node.id} ({node.kind.value})")

    def remove_node(self, node: DSGNode) -> bool:
        """Remove node and every edge that starts or ends at it.

        Edges are matched by node id, so edges of another node sharing
        the same id are removed too. Keeping ids unique is up to the caller.
        """
        if not any(n is node for n in self._nodes):
            return False

        self._nodes = [n for n in self._nodes if n is not node]
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.touches(node.id)]
        self.last_updated = datetime.now()
        logger.debug(f"Removed node: {node.id} and {before - len(self._edges)} edge(s)")
        return True

    def get_node(self, node_id: str) -> Optional[DSGNode]:
        """Get the first node with the given ID."""
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        """Check if node exists."""
        return self.get_node(node_id) is not None

    def get_nodes_by_kind(self, kind: NodeKind) -> List[DSGNode]:
        """Get all nodes of a specific kind, in store order."""
        return [n for n in self._nodes if n.kind == kind]

    def get_rooms(self) -> List[RoomNode]:
        """Get all room nodes."""
        return self.get_nodes_by_kind(NodeKind.ROOM)

    def get_places(self) -> List[PlaceNode]:
        """Get all place nodes."""
        return self.get_nodes_by_kind(NodeKind.PLACE)

    def get_objects(self) -> List[ObjectNode]:
        """Get all object nodes."""
        return self.get_nodes_by_kind(NodeKind.OBJECT)

    @property
    def nodes(self) -> List[DSGNode]:
        """Get all nodes."""
        return self._nodes

    @property
    def node_count(self) -> int:
        """Get number of nodes."""
        return len(self._nodes)

    # =========================================================================
    # Edge Operations
    # =========================================================================

    def check_edge(self, edge: DSGEdge) -> Optional[GraphError]:
        """Validate an edge against the store without mutating it.

        Only traversability edges are checked; their endpoints must
        resolve to places. Returns None if the edge may be added.
        """
        if edge.kind != EdgeKind.TRAVERSABILITY:
            return None

        start = self.get_node(edge.start_id)
        end = self.get_node(edge.end_id)
        if start is None or end is None:
            return GraphError.UNKNOWN_NODE
        if start.kind != NodeKind.PLACE or end.kind != NodeKind.PLACE:
            return GraphError.INVALID_EDGE_KIND
        return None

    def add_edge(self, edge: DSGEdge) -> bool:
        """Add an edge, rejecting traversability between non-places.

        Returns False and leaves the graph unchanged if rejected.
        """
        error = self.check_edge(edge)
        if error is not None:
            if error == GraphError.INVALID_EDGE_KIND:
                logger.error(
                    f"{error.name}: traversability edges can only connect "
                    f"place nodes ({edge.edge_id})"
                )
            else:
                logger.error(f"{error.name}: cannot add edge {edge.edge_id}")
            return False

        self._edges.append(edge)
        self.last_updated = datetime.now()
        logger.debug(f"Added edge: {edge.edge_id}")
        return True

    def remove_edge(self, edge: DSGEdge) -> bool:
        """Remove this exact edge object."""
        for i, e in enumerate(self._edges):
            if e is edge:
                del self._edges[i]
                self.last_updated = datetime.now()
                logger.debug(f"Removed edge: {edge.edge_id}")
                return True
        return False

    def get_edges(self, start_id: str = None, end_id: str = None,
                  kind: EdgeKind = None) -> List[DSGEdge]:
        """Query edges by criteria."""
        return [e for e in self._edges
                if (start_id is None or e.start_id == start_id)
                and (end_id is None or e.end_id == end_id)
                and (kind is None or e.kind == kind)]

    def get_outgoing_edges(self, node_id: str, kind: EdgeKind = None) -> List[DSGEdge]:
        """Get all edges starting at a node."""
        return self.get_edges(start_id=node_id, kind=kind)

    def get_incoming_edges(self, node_id: str, kind: EdgeKind = None) -> List[DSGEdge]:
        """Get all edges ending at a node."""
        return self.get_edges(end_id=node_id, kind=kind)

    def edge_exists(self, start_id: str, end_id: str, kind: EdgeKind) -> bool:
        """Check for an edge of this kind between two nodes.

        Traversability edges match in either direction.
        """
        for edge in self._edges:
            if edge.kind != kind:
                continue
            if kind == EdgeKind.TRAVERSABILITY:
                if edge.connects(start_id, end_id) or edge.connects(end_id, start_id):
                    return True
            elif edge.start_id == start_id and edge.end_id == end_id:
                return True
        return False

    def neighbors(self, node: DSGNode) -> List[DSGNode]:
        """Nodes reachable from node over one edge.

        Containment is followed only from start to end; traversability
        is followed both ways.
        """
        result = []
        for edge in self._edges:
            if edge.start_id == node.id:
                other = self.get_node(edge.end_id)
                if other is not None:
                    result.append(other)
            if not edge.directed and edge.end_id == node.id:
                other = self.get_node(edge.start_id)
                if other is not None:
                    result.append(other)
        return result

    @property
    def edges(self) -> List[DSGEdge]:
        """Get all edges."""
        return self._edges

    @property
    def edge_count(self) -> int:
        """Get number of edges."""
        return len(self._edges)

    # =========================================================================
    # Edge Authoring
    # =========================================================================

    @staticmethod
    def is_valid_containment(start: DSGNode, end: DSGNode) -> bool:
        """Containment runs Room->Place or Place->Object."""
        return ((start.kind == NodeKind.ROOM and end.kind == NodeKind.PLACE) or
                (start.kind == NodeKind.PLACE and end.kind == NodeKind.OBJECT))

    @staticmethod
    def is_valid_traversability(a: DSGNode, b: DSGNode) -> bool:
        """Traversability runs Place<->Place."""
        return a.kind == NodeKind.PLACE and b.kind == NodeKind.PLACE

    def connect_containment(self, start: DSGNode, end: DSGNode) -> bool:
        """Add a validated containment edge from start to end."""
        if self.edge_exists(start.id, end.id, EdgeKind.CONTAINMENT):
            logger.error(f"{GraphError.DUPLICATE_EDGE.name}: containment edge "
                         f"{start.id} -> {end.id} already exists")
            return False
        if not self.is_valid_containment(start, end):
            logger.error(f"{GraphError.INVALID_CONTAINMENT.name}: cannot contain "
                         f"{end.kind.value} in {start.kind.value}")
            return False
        return self.add_edge(DSGEdge.containment(start.id, end.id))

    def connect_traversable(self, a: DSGNode, b: DSGNode) -> bool:
        """Add a validated traversability edge between two places."""
        if self.edge_exists(a.id, b.id, EdgeKind.TRAVERSABILITY):
            logger.error(f"{GraphError.DUPLICATE_EDGE.name}: traversability edge "
                         f"{a.id} - {b.id} already exists")
            return False
        return self.add_edge(DSGEdge.traversability(a.id, b.id))

    def retarget_edge(self, edge: DSGEdge, new_start: DSGNode,
                      new_end: DSGNode) -> bool:
        """Re-point an existing edge, keeping its kind.

        The edge is left untouched if the new endpoints are not valid
        for its kind.
        """
        if not any(e is edge for e in self._edges):
            return False

        if edge.kind == EdgeKind.CONTAINMENT:
            valid = self.is_valid_containment(new_start, new_end)
        else:
            valid = self.is_valid_traversability(new_start, new_end)
        if not valid:
            logger.error(f"Invalid endpoints for {edge.kind.value} edge: "
                         f"{new_start.kind.value} / {new_end.kind.value}")
            return False

        edge.start_id = new_start.id
        edge.end_id = new_end.id
        self.last_updated = datetime.now()
        logger.debug(f"Retargeted edge: {edge.edge_id}")
        return True

    # =========================================================================
    # Spatial Queries
    # =========================================================================

    def find_containing_place(self, obj: DSGNode) -> Optional[PlaceNode]:
        """First place in store order that covers enough of obj's footprint."""
        for place in self.get_places():
            if overlap_fraction(place, obj, self.overlap_threshold):
                return place
        return None

    # =========================================================================
    # Serialization and Summary
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Read-only snapshot of nodes and edges for renderers."""
        return {
            "name": self.name,
            "last_updated": self.last_updated.isoformat(),
            "nodes": [n.to_dict() for n in self._nodes],
            "edges": [e.to_dict() for e in self._edges],
        }

    def summary(self) -> str:
        """Generate a human-readable summary of the graph."""
        lines = [
            f"DynamicSceneGraph: {self.name}",
            f"  Nodes: {self.node_count}",
            f"    Rooms: {len(self.get_rooms())}",
            f"    Places: {len(self.get_places())}",
            f"    Objects: {len(self.get_objects())}",
            f"  Edges: {self.edge_count}",
            f"    Containment: {len(self.get_edges(kind=EdgeKind.CONTAINMENT))}",
            f"    Traversability: {len(self.get_edges(kind=EdgeKind.TRAVERSABILITY))}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DynamicSceneGraph(name={self.name}, nodes={self.node_count}, edges={self.edge_count})"
