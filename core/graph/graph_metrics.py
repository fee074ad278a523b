"""
Graph Metrics — summary statistics and visualization payload.

Time Complexity: O(V + E)
Memory: O(V + E) for the exported payload
"""

from typing import Any, Dict, List, Set, Tuple

import networkx as nx
import pandas as pd


def compute_graph_summary(G: nx.MultiDiGraph) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    simple = nx.DiGraph(G)
    return {
        "total_nodes": G.number_of_nodes(),
        "total_edges": G.number_of_edges(),
        "unique_edges": simple.number_of_edges(),
        "density": round(nx.density(simple), 4) if simple.number_of_nodes() > 1 else 0.0,
    }


def build_graph_data(
    G: nx.MultiDiGraph,
    df: pd.DataFrame,
    suspicious_accounts: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Export nodes and links for the frontend graph view.

    One node per account, annotated with its suspicion data when flagged.
    Parallel transactions collapse into one link per (source, target) pair,
    carrying the first transaction's amount and timestamp. Links follow
    transaction order in `df`, the prepared frame the graph was built from.
    """
    flagged = {a["account_id"]: a for a in suspicious_accounts}

    nodes: List[Dict[str, Any]] = []
    for account, attrs in G.nodes(data=True):
        hit = flagged.get(account)
        nodes.append(
            {
                "id": account,
                "suspicious": hit is not None,
                "suspicion_score": hit["suspicion_score"] if hit else 0,
                "patterns": list(hit["detected_patterns"]) if hit else [],
                "ring_id": hit["ring_id"] if hit else None,
                "total_transactions": attrs["total_transactions"],
                "in_degree": attrs["in_degree"],
                "out_degree": attrs["out_degree"],
            }
        )

    links: List[Dict[str, Any]] = []
    seen: Set[Tuple[str, str]] = set()
    rows = zip(df["sender_id"], df["receiver_id"], df["amount"], df["timestamp"])
    for u, v, amount, ts in rows:
        if (u, v) in seen:
            continue
        seen.add((u, v))
        links.append(
            {
                "source": u,
                "target": v,
                "amount": float(amount),
                "timestamp": pd.Timestamp(ts).strftime("%Y-%m-%d %H:%M:%S"),
            }
        )

    return {"nodes": nodes, "links": links}
