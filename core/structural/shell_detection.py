"""
Shell Chain Detection Module.

Finds chains of ≥3 accounts whose interior (pass-through) accounts have
low activity, i.e. total transactions ≤ SHELL_MAX_TRANSACTIONS.

A breadth-first search runs from every account up to SHELL_MAX_DEPTH hops.
Each account is reached at most once per root, so alternate routes through
an already-reached account are not explored. The same path found from
different roots is reported once per root.

Time Complexity: O(V × (V + E)) worst case
Memory: O(V × D) per BFS for queued paths, D = SHELL_MAX_DEPTH
"""

import logging
from collections import deque
from typing import Any, Dict, List

import networkx as nx

from app.config import (
    RING_RISK_SHELL,
    SHELL_MAX_DEPTH,
    SHELL_MAX_TRANSACTIONS,
    SHELL_MIN_CHAIN_LENGTH,
)

logger = logging.getLogger(__name__)


def _is_low_activity(G: nx.MultiDiGraph, account: str) -> bool:
    return G.nodes[account]["total_transactions"] <= SHELL_MAX_TRANSACTIONS


def detect_shell_chains(G: nx.MultiDiGraph) -> List[Dict[str, Any]]:
    """
    Detect shell chain patterns.

    Returns:
        List of {"members", "intermediates", "risk_score"} dicts.
    """
    chains: List[Dict[str, Any]] = []

    for root in G.nodes():
        queue = deque([(root, [root], 0)])
        visited = {root}

        while queue:
            node, path, depth = queue.popleft()
            if depth >= SHELL_MAX_DEPTH:
                continue

            for neighbor in G.successors(node):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                new_path = path + [neighbor]

                if len(new_path) >= SHELL_MIN_CHAIN_LENGTH:
                    intermediates = new_path[1:-1]
                    if intermediates and all(_is_low_activity(G, n) for n in intermediates):
                        chains.append(
                            {
                                "members": new_path,
                                "intermediates": intermediates,
                                "risk_score": RING_RISK_SHELL,
                            }
                        )

                queue.append((neighbor, new_path, depth + 1))

    logger.debug("Shell detection: chains=%d", len(chains))
    return chains
