"""Directed graph data structure for workflow analysis.

This module provides a small directed graph used by the validator and the
simulator. It keeps insertion order everywhere (nodes, successor lists,
predecessor lists) so every traversal over it is deterministic.

Time Complexity:
- Node/Edge addition: O(1)
- Successor/predecessor lookup: O(1)

Space Complexity: O(V + E)
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from hrflow.schemas.workflow import WorkflowGraph

NodeId = TypeVar("NodeId", bound=Hashable)


class Graph(Generic[NodeId]):
    """Ordered directed graph with forward and reverse adjacency.

    Parallel edges and self-loops are stored as given; successor lists may
    therefore contain the same target more than once.

    Type Parameters:
        NodeId: Hashable type used as node identifier (node id strings).

    Example:
        >>> graph = Graph[str]()
        >>> graph.add_edge("start", "review")
        >>> graph.get_successors("start")
        ['review']
    """

    __slots__ = ("_adjacency", "_edge_count", "_nodes", "_reverse_adjacency")

    def __init__(self) -> None:
        """Initialize an empty directed graph."""
        self._adjacency: defaultdict[NodeId, list[NodeId]] = defaultdict(list)
        self._reverse_adjacency: defaultdict[NodeId, list[NodeId]] = defaultdict(list)
        # dict keys double as an insertion-ordered set
        self._nodes: dict[NodeId, None] = {}
        self._edge_count: int = 0

    @classmethod
    def from_workflow(cls, workflow: WorkflowGraph) -> Graph[str]:
        """Build a graph from a workflow document.

        Nodes are added in document order first, then edges in document
        order. Edge endpoints that are not workflow nodes are added after
        the workflow's own nodes.

        Args:
            workflow: The workflow graph document.

        Returns:
            Graph keyed by node id.
        """
        graph = Graph[str]()
        for node in workflow.nodes:
            graph.add_node(node.id)
        for edge in workflow.edges:
            graph.add_edge(edge.source, edge.target)
        return graph

    @property
    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return self._edge_count

    def add_node(self, node_id: NodeId) -> None:
        """Add a node to the graph. Adding an existing node is a no-op."""
        self._nodes.setdefault(node_id, None)

    def add_edge(self, source: NodeId, target: NodeId) -> None:
        """Add a directed edge from source to target.

        Both nodes are added to the graph if they don't exist.

        Args:
            source: The source node ID.
            target: The target node ID.
        """
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append(target)
        self._reverse_adjacency[target].append(source)
        self._edge_count += 1

    def nodes(self) -> Iterator[NodeId]:
        """Iterate node ids in insertion order."""
        return iter(self._nodes)

    def get_successors(self, node_id: NodeId) -> list[NodeId]:
        """Get successor nodes in edge insertion order.

        Returns:
            List of successor node IDs. Empty list if node has no successors.
        """
        return self._adjacency.get(node_id, [])

    def get_predecessors(self, node_id: NodeId) -> list[NodeId]:
        """Get predecessor nodes in edge insertion order.

        Returns:
            List of predecessor node IDs. Empty list if node has no predecessors.
        """
        return self._reverse_adjacency.get(node_id, [])

    def get_out_degree(self, node_id: NodeId) -> int:
        """Get the number of outgoing edges for a node."""
        return len(self._adjacency.get(node_id, []))

    def __contains__(self, node_id: object) -> bool:
        """Check if a node exists in the graph."""
        return node_id in self._nodes

    def __len__(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    def __repr__(self) -> str:
        """Return string representation of the graph."""
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
