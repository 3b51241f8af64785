"""Undirected graph with breadth-first distances."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """An undirected graph whose nodes are arbitrary hashable values."""

    def __init__(self) -> None:
        # Dicts used as insertion-ordered sets keep traversal deterministic.
        self._adj: dict[T, dict[T, None]] = {}

    def add_node(self, node: T) -> bool:
        """Add a node; return False if it was already present."""
        if node in self._adj:
            return False
        self._adj[node] = {}
        return True

    def add_edge(self, node1: T, node2: T) -> None:
        """Connect two existing nodes."""
        if node1 not in self._adj or node2 not in self._adj:
            raise ValueError(
                "At least one of the nodes does not exist prior to this operation"
            )
        self._adj[node1][node2] = None
        self._adj[node2][node1] = None

    def distances(self, source: T) -> tuple[dict[T, int], dict[T, T]]:
        """Return the hop distance to every reachable node and each node's predecessor."""
        if source not in self._adj:
            raise ValueError("Source node does not exist in the graph!")
        dist: dict[T, int] = {source: 0}
        prev: dict[T, T] = {}
        queue: deque[T] = deque([source])
        while queue:
            current = queue.popleft()
            for nxt in self._adj[current]:
                if nxt in dist:
                    continue
                dist[nxt] = dist[current] + 1
                prev[nxt] = current
                queue.append(nxt)
        return dist, prev

    def neighbours(self, node: T) -> set[T]:
        """Return the set of nodes adjacent to ``node``."""
        if node not in self._adj:
            raise ValueError("The node does not exist in the graph")
        return set(self._adj[node])

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)