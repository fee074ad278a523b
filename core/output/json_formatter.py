"""
JSON Output Formatter.

Produces the response structure:
{
    "suspicious_accounts": [...],
    "fraud_rings": [...],
    "summary": {...},
    "graph": {"nodes": [...], "links": [...]}
}

Time Complexity: O(V + R)
Memory: O(V + R)
"""

from typing import Any, Dict, List, Optional


def _format_account(account: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "account_id": str(account["account_id"]),
        "suspicion_score": int(account["suspicion_score"]),
        "detected_patterns": list(account["detected_patterns"]),
        "ring_id": account["ring_id"],
    }


def _format_ring(ring: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "ring_id": ring["ring_id"],
        "member_accounts": [str(m) for m in ring["member_accounts"]],
        "pattern_type": ring["pattern_type"],
        "risk_score": int(ring["risk_score"]),
    }


def format_output(
    suspicious_accounts: List[Dict[str, Any]],
    fraud_rings: List[Dict[str, Any]],
    summary: Dict[str, Any],
    graph_data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict. Input order is kept."""
    result: Dict[str, Any] = {
        "suspicious_accounts": [_format_account(a) for a in suspicious_accounts],
        "fraud_rings": [_format_ring(r) for r in fraud_rings],
        "summary": dict(summary),
    }
    if graph_data is not None:
        result["graph"] = graph_data
    return result
