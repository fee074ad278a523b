"""
Suspicion Scoring Engine.

Computes a per-account suspicion score from the ledger built by the ring
aggregator. Additive model:

  +40  cycle member (per ring)
  +35  smurfing aggregator (per ring)
  +20  smurfing participant (per ring)
  +30  shell intermediate (per ring)
  +15  high velocity (> 20 total transactions)
  +10  large transfers (mean outgoing amount > 5000)

The sum is clamped to [0, 100] and rounded to an integer.

Time Complexity: O(V × degree)
Memory: O(V)
"""

import logging
from typing import Any, Dict, List

import networkx as nx

from app.config import (
    HIGH_VELOCITY_THRESHOLD,
    LARGE_AMOUNT_THRESHOLD,
    MAX_SUSPICION_SCORE,
    SCORE_HIGH_VELOCITY,
    SCORE_LARGE_AMOUNT,
)
from core.graph.graph_builder import average_outgoing_amount
from core.ring_detection.ring_aggregator import AccountLedger
from core.risk.false_positive_filter import is_legitimate_account

logger = logging.getLogger(__name__)


def compute_suspicion_score(
    G: nx.MultiDiGraph, account: str, scores: List[int]
) -> int:
    """Sum partial scores, add behavioural bonuses, clamp to [0, 100]."""
    score = float(sum(scores))

    if G.nodes[account]["total_transactions"] > HIGH_VELOCITY_THRESHOLD:
        score += SCORE_HIGH_VELOCITY

    if average_outgoing_amount(G, account) > LARGE_AMOUNT_THRESHOLD:
        score += SCORE_LARGE_AMOUNT

    return int(max(0, min(round(score), MAX_SUSPICION_SCORE)))


def score_accounts(
    G: nx.MultiDiGraph, ledger: Dict[str, AccountLedger]
) -> List[Dict[str, Any]]:
    """
    Build the suspicious-accounts list.

    Accounts caught by the false-positive rule are dropped. The rest are
    sorted by score descending; ties keep ledger order.
    """
    suspicious: List[Dict[str, Any]] = []
    suppressed = 0

    for account, entry in ledger.items():
        if is_legitimate_account(G, account, "cycle" in entry.patterns):
            suppressed += 1
            continue

        suspicious.append(
            {
                "account_id": account,
                "suspicion_score": compute_suspicion_score(G, account, entry.scores),
                "detected_patterns": list(dict.fromkeys(entry.patterns)),
                "ring_id": entry.ring_ids[0] if entry.ring_ids else None,
            }
        )

    if suppressed:
        logger.info("False positive control suppressed %d accounts", suppressed)

    suspicious.sort(key=lambda x: x["suspicion_score"], reverse=True)
    return suspicious
