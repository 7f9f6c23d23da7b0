"""Print Queue: checking and fixing page orderings against rules."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise


@dataclass(frozen=True)
class OrderingGraph:
    """Page ordering rules as directed edges before -> after."""

    edges: frozenset[tuple[int, int]]

    @classmethod
    def parse(cls, text: str) -> OrderingGraph:
        edges = set()
        for line in text.splitlines():
            before, sep, after = line.partition("|")
            if not sep:
                raise ValueError(f"malformed rule: {line!r}")
            edges.add((int(before), int(after)))
        return cls(frozenset(edges))

    def is_ordered(self, pages: Sequence[int]) -> bool:
        """True if every consecutive pair is backed by a rule."""
        return all(pair in self.edges for pair in pairwise(pages))

    def reorder(self, pages: Sequence[int]) -> list[int]:
        """Topologically sort the pages using the rules among them."""
        nodes = set(pages)
        remaining = {(a, b) for a, b in self.edges if a in nodes and b in nodes}
        incoming = {node: 0 for node in nodes}
        for _, after in remaining:
            incoming[after] += 1
        ready = [node for node, count in incoming.items() if count == 0]
        heapq.heapify(ready)
        ordered: list[int] = []
        while ready:
            node = heapq.heappop(ready)
            ordered.append(node)
            for edge in sorted(e for e in remaining if e[0] == node):
                remaining.discard(edge)
                incoming[edge[1]] -= 1
                if incoming[edge[1]] == 0:
                    heapq.heappush(ready, edge[1])
        if remaining:
            before, after = min(remaining)
            raise ValueError(f"cycle detected, there's still an edge {before} -> {after}")
        return ordered


def _middle(pages: Sequence[int]) -> int:
    if len(pages) % 2 == 0:
        raise ValueError("page list has no middle element")
    return pages[len(pages) // 2]


def _parse(text: str) -> tuple[OrderingGraph, list[list[int]]]:
    rules, sep, updates = text.strip().partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between rules and updates")
    graph = OrderingGraph.parse(rules)
    pages = [[int(page) for page in line.split(",")] for line in updates.splitlines()]
    return graph, pages


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    graph, updates = _parse(text)
    return sum(_middle(pages) for pages in updates if graph.is_ordered(pages))


def part2(text: str) -> int:
    """Sum of middle pages of incorrectly ordered updates after fixing them."""
    graph, updates = _parse(text)
    return sum(
        _middle(graph.reorder(pages))
        for pages in updates
        if not graph.is_ordered(pages)
    )