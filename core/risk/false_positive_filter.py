"""
False Positive Control Module.

High-volume accounts with a broad, diverse set of counterparties look like
merchants or payment processors rather than mules. Such accounts are kept
out of the suspicious-accounts list unless they sit on a cycle; their ring
memberships are left untouched.

Time Complexity: O(degree) per account
Memory: O(degree)
"""

import networkx as nx

from app.config import LEGIT_MIN_COUNTERPARTIES, LEGIT_MIN_TRANSACTIONS
from core.graph.graph_builder import unique_counterparties


def is_legitimate_account(G: nx.MultiDiGraph, account: str, has_cycle: bool) -> bool:
    """True when the account should be suppressed as a likely false positive."""
    if has_cycle:
        return False
    if G.nodes[account]["total_transactions"] <= LEGIT_MIN_TRANSACTIONS:
        return False
    return len(unique_counterparties(G, account)) > LEGIT_MIN_COUNTERPARTIES
