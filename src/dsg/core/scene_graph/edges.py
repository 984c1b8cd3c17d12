"""Edge types for the Dynamic Scene Graph.

Edges reference their endpoints by node id, resolved against the graph:
- Containment: directed, start spatially holds end (Room->Place, Place->Object)
- Traversability: undirected, two Places are walkable between one another
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any

from ..enums import EdgeKind


@dataclass(eq=False)
class DSGEdge:
    """Edge connecting two nodes in the scene graph.

    Edges compare by identity: two edges with the same endpoints are
    still distinct edges.

    Attributes:
        start_id: ID of start node
        end_id: ID of end node
        kind: CONTAINMENT or TRAVERSABILITY
        directed: True for containment, False for traversability
        created_at: When this edge was created
    """
    start_id: str
    end_id: str
    kind: EdgeKind
    directed: bool = True
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def edge_id(self) -> str:
        """Readable signature for this edge."""
        arrow = "-->" if self.directed else "---"
        return f"{self.start_id}--{self.kind.value}{arrow}{self.end_id}"

    def touches(self, node_id: str) -> bool:
        """Check if node is either endpoint."""
        return self.start_id == node_id or self.end_id == node_id

    def connects(self, start_id: str, end_id: str) -> bool:
        """Check if edge links the two ids, ignoring order when undirected."""
        if self.start_id == start_id and self.end_id == end_id:
            return True
        if not self.directed:
            return self.start_id == end_id and self.end_id == start_id
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize edge to dictionary."""
        return {
            "start_id": self.start_id,
            "end_id": self.end_id,
            "kind": self.kind.value,
            "directed": self.directed,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def containment(cls, start_id: str, end_id: str) -> "DSGEdge":
        """Create a directed containment edge."""
        return cls(start_id=start_id, end_id=end_id,
                   kind=EdgeKind.CONTAINMENT, directed=True)

    @classmethod
    def traversability(cls, a_id: str, b_id: str) -> "DSGEdge":
        """Create an undirected traversability edge."""
        return cls(start_id=a_id, end_id=b_id,
                   kind=EdgeKind.TRAVERSABILITY, directed=False)

    def __repr__(self) -> str:
        return f"DSGEdge({self.edge_id})"
