"""Graph algorithms for workflow validation and simulation.

This module provides the traversals the engine is built on:
- Cycle detection using DFS with an on-stack set
- Forward and backward reachability using BFS
- Pre-order depth-first walk used by the simulator

Every algorithm uses an explicit stack or queue instead of recursion, so
graph size is not bounded by the interpreter's recursion limit, and every
algorithm keeps a visited set, so graphs with cycles always terminate.

Time Complexity: O(V + E) for all algorithms.
Space Complexity: O(V) for all algorithms.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from hrflow.services.workflow.graph import Graph

NodeId = TypeVar("NodeId", bound=Hashable)


class GraphAlgorithms(Generic[NodeId]):
    """Collection of graph algorithms for workflow analysis.

    All methods are static and operate on the Graph data structure.
    Ties are broken by insertion order of nodes and edges.

    Example:
        >>> graph = Graph[str]()
        >>> graph.add_edge("a", "b")
        >>> graph.add_edge("b", "a")
        >>> GraphAlgorithms.detect_cycle(graph)
        ['a', 'b', 'a']
    """

    @staticmethod
    def detect_cycle(graph: Graph[NodeId]) -> list[NodeId] | None:
        """Detect a cycle using iterative DFS with path tracking.

        Roots are tried in node insertion order. A back-edge to a node that
        is still on the DFS path closes a cycle; self-loops are cycles.

        Args:
            graph: The graph to check for cycles.

        Returns:
            List of node IDs forming the first cycle found, starting and
            ending on the same node, or None if the graph is acyclic.

        Example:
            >>> graph.add_edge(a, b)
            >>> graph.add_edge(b, c)
            >>> graph.add_edge(c, a)
            >>> GraphAlgorithms.detect_cycle(graph)
            [a, b, c, a]
        """
        visited: set[NodeId] = set()

        for root in graph.nodes():
            if root in visited:
                continue

            path: list[NodeId] = [root]
            on_path: set[NodeId] = {root}
            # Each frame holds a node and an iterator over its successors
            stack: list[tuple[NodeId, Iterator[NodeId]]] = [
                (root, iter(graph.get_successors(root)))
            ]
            visited.add(root)

            while stack:
                node, successors = stack[-1]
                advanced = False
                for neighbor in successors:
                    if neighbor in on_path:
                        cycle_start = path.index(neighbor)
                        return [*path[cycle_start:], neighbor]
                    if neighbor not in visited:
                        visited.add(neighbor)
                        on_path.add(neighbor)
                        path.append(neighbor)
                        stack.append((neighbor, iter(graph.get_successors(neighbor))))
                        advanced = True
                        break

                if not advanced:
                    stack.pop()
                    path.pop()
                    on_path.discard(node)

        return None

    @staticmethod
    def reachable_from(
        graph: Graph[NodeId],
        sources: Iterable[NodeId],
    ) -> set[NodeId]:
        """Find every node reachable from any source over outgoing edges.

        Sources are themselves reachable.

        Args:
            graph: The graph to analyze.
            sources: Starting nodes.

        Returns:
            Set of reachable node IDs.
        """
        return GraphAlgorithms._closure(graph.get_successors, sources)

    @staticmethod
    def reaching(
        graph: Graph[NodeId],
        targets: Iterable[NodeId],
    ) -> set[NodeId]:
        """Find every node that has a path to any target.

        Walks incoming edges backwards from the targets. Targets are
        themselves included.

        Args:
            graph: The graph to analyze.
            targets: Destination nodes.

        Returns:
            Set of node IDs with a path to some target.
        """
        return GraphAlgorithms._closure(graph.get_predecessors, targets)

    @staticmethod
    def preorder(graph: Graph[NodeId], root: NodeId) -> Iterator[NodeId]:
        """Walk the graph depth-first from root, yielding nodes in pre-order.

        Produces the same sequence as the recursive walk "emit the node,
        then descend into each successor in edge order", with every node
        emitted at most once. Successors are pushed in reverse so the first
        edge is explored first.

        Args:
            graph: The graph to walk.
            root: Node to start from.

        Yields:
            Node IDs in visit order.

        Example:
            >>> graph.add_edge("s", "a")
            >>> graph.add_edge("s", "b")
            >>> graph.add_edge("a", "c")
            >>> list(GraphAlgorithms.preorder(graph, "s"))
            ['s', 'a', 'c', 'b']
        """
        visited: set[NodeId] = set()
        stack: list[NodeId] = [root]

        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            yield node

            for successor in reversed(graph.get_successors(node)):
                if successor not in visited:
                    stack.append(successor)

    @staticmethod
    def _closure(
        neighbors_of: Callable[[NodeId], list[NodeId]],
        seeds: Iterable[NodeId],
    ) -> set[NodeId]:
        reached: set[NodeId] = set()
        queue: deque[NodeId] = deque(seeds)

        while queue:
            current = queue.popleft()
            if current in reached:
                continue
            reached.add(current)

            for neighbor in neighbors_of(current):
                if neighbor not in reached:
                    queue.append(neighbor)

        return reached


__all__ = [
    "GraphAlgorithms",
]
