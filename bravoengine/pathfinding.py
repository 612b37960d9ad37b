"""A* shortest paths over a tile graph using the Manhattan distance."""

from __future__ import annotations

import heapq
from typing import Dict, List, Mapping, Sequence


class Pathfinding:
    """Finds shortest paths in a graph given as an adjacency list.

    Nodes are tile indices ``row * map_width + col``.
    """

    def __init__(self, adjacency_list: Mapping[int, Sequence[int]], map_width: int, map_height: int) -> None:
        self._adjacency = {node: list(neighbours) for node, neighbours in adjacency_list.items()}
        self.map_width = map_width
        self.map_height = map_height

    @property
    def adjacency_list(self) -> Dict[int, List[int]]:
        return {node: list(neighbours) for node, neighbours in self._adjacency.items()}

    def distance(self, node_a: int, node_b: int) -> float:
        """Manhattan distance between two tile indices."""
        ax, ay = node_a % self.map_width, node_a // self.map_width
        bx, by = node_b % self.map_width, node_b // self.map_width
        return float(abs(ax - bx) + abs(ay - by))

    def find_path(self, start: int, goal: int) -> List[int]:
        """Nodes from ``start`` to ``goal`` inclusive, or an empty list if unreachable."""
        open_heap = [(self.distance(start, goal), start)]
        came_from: Dict[int, int] = {}
        g_score: Dict[int, float] = {start: 0.0}
        closed = set()

        while open_heap:
            _, current = heapq.heappop(open_heap)
            if current == goal:
                return self._reconstruct_path(came_from, current)
            if current in closed:
                continue
            closed.add(current)
            for neighbour in self._adjacency.get(current, ()):
                tentative = g_score[current] + 1.0
                if tentative < g_score.get(neighbour, float("inf")):
                    came_from[neighbour] = current
                    g_score[neighbour] = tentative
                    heapq.heappush(open_heap, (tentative + self.distance(neighbour, goal), neighbour))
        return []

    @staticmethod
    def _reconstruct_path(came_from: Dict[int, int], current: int) -> List[int]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path