"""Connectivity checks for the Dynamic Scene Graph."""

import logging
from typing import List

from .graph import DynamicSceneGraph
from .nodes import DSGNode


logger = logging.getLogger(__name__)


def find_unconnected(graph: DynamicSceneGraph) -> List[DSGNode]:
    """Nodes that are not an endpoint of any edge, in store order."""
    connected = set()
    for edge in graph.edges:
        connected.add(edge.start_id)
        connected.add(edge.end_id)
    return [n for n in graph.nodes if n.id not in connected]


def connectivity_report(graph: DynamicSceneGraph) -> bool:
    """Log every unconnected node.

    Returns:
        True if all nodes are connected
    """
    unconnected = find_unconnected(graph)
    for node in unconnected:
        logger.info(f"Unconnected node - kind: {node.kind.value}, id: {node.id}")
    if not unconnected:
        logger.info("All nodes are connected")
    return not unconnected
