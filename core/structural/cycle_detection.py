"""
Cycle Detection Module — Circular Fund Routing.

Finds simple directed cycles of length 3–5 with a depth-bounded DFS.

A single DFS is run from every node not yet visited by an earlier search.
When a successor is already on the active path, the cycle runs from that
successor's path position to the current node. Branches are cut once the
path holds MAX_CYCLE_LENGTH nodes.

Cycles are de-duplicated by their sorted vertex set, so two distinct cycles
touching the same accounts in a different order are reported once.

Time Complexity: O(V + E) per DFS with the global visited set;
    path scans bounded by MAX_CYCLE_LENGTH.
Memory: O(V) for visited/on-path sets + O(C × L) for discovered cycles.
"""

import logging
from typing import Iterable, List, Set, Tuple

import networkx as nx

from app.config import MAX_CYCLE_LENGTH, MIN_CYCLE_LENGTH

logger = logging.getLogger(__name__)


def canonical_cycle(members: Iterable[str]) -> Tuple[str, ...]:
    """Order-independent key for a cycle's vertex set."""
    return tuple(sorted(members))


def detect_cycles(G: nx.MultiDiGraph) -> List[List[str]]:
    """
    Detect circular routing cycles of length MIN_CYCLE_LENGTH..MAX_CYCLE_LENGTH.

    Returns:
        List of cycles, each the member accounts in discovery order.
    """
    cycles: List[List[str]] = []
    seen: Set[Tuple[str, ...]] = set()
    visited: Set[str] = set()
    on_path: Set[str] = set()
    path: List[str] = []

    def dfs(node: str) -> None:
        visited.add(node)
        on_path.add(node)
        path.append(node)

        for neighbor in G.successors(node):
            if neighbor in on_path:
                cycle = path[path.index(neighbor):]
                if MIN_CYCLE_LENGTH <= len(cycle) <= MAX_CYCLE_LENGTH:
                    key = canonical_cycle(cycle)
                    if key not in seen:
                        seen.add(key)
                        cycles.append(list(cycle))
            elif neighbor not in visited and len(path) < MAX_CYCLE_LENGTH:
                dfs(neighbor)

        path.pop()
        on_path.discard(node)

    for start in G.nodes():
        if start not in visited:
            dfs(start)

    logger.debug("Cycle detection: unique_cycles=%d", len(cycles))
    return cycles
