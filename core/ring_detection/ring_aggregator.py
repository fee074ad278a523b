"""
Ring Aggregator — combines rings from all detection modules.

Folds cycle, smurfing, and shell findings, in that order, into a single
ring list with sequential RING-NNN identifiers and a per-account ledger of
pattern tags, ring ids, and partial scores.

Time Complexity: O(R × M) where R = rings, M = members per ring
Memory: O(R × M)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from app.config import (
    RING_ID_PREFIX,
    RING_RISK_CYCLE,
    SCORE_CYCLE,
    SCORE_SHELL_INTERMEDIATE,
    SCORE_SMURF_AGGREGATOR,
    SCORE_SMURF_PARTICIPANT,
)


@dataclass
class AccountLedger:
    """Pattern evidence accumulated for one account during a single run."""

    patterns: List[str] = field(default_factory=list)
    ring_ids: List[str] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)

    def record(self, pattern: str, ring_id: str, score: int) -> None:
        self.patterns.append(pattern)
        self.ring_ids.append(ring_id)
        self.scores.append(score)


def format_ring_id(counter: int) -> str:
    return f"{RING_ID_PREFIX}{counter:03d}"


def assemble_rings(
    cycles: List[List[str]],
    smurf_rings: List[Dict[str, Any]],
    shell_chains: List[Dict[str, Any]],
) -> Tuple[List[Dict[str, Any]], Dict[str, AccountLedger]]:
    """
    Assign ring ids and build the account ledger.

    Returns:
        (fraud_rings, ledger) where ledger preserves first-touch account order.
    """
    fraud_rings: List[Dict[str, Any]] = []
    ledger: Dict[str, AccountLedger] = {}

    def _entry(account: str) -> AccountLedger:
        if account not in ledger:
            ledger[account] = AccountLedger()
        return ledger[account]

    def _new_ring(members: List[str], pattern_type: str, risk_score: int) -> str:
        ring_id = format_ring_id(len(fraud_rings) + 1)
        fraud_rings.append(
            {
                "ring_id": ring_id,
                "member_accounts": list(members),
                "pattern_type": pattern_type,
                "risk_score": risk_score,
            }
        )
        return ring_id

    # ── Cycles ────────────────────────────────────────────────────────
    for cycle in cycles:
        ring_id = _new_ring(cycle, "cycle", RING_RISK_CYCLE)
        for account in cycle:
            _entry(account).record("cycle", ring_id, SCORE_CYCLE)

    # ── Smurfing ──────────────────────────────────────────────────────
    for smurf in smurf_rings:
        ring_id = _new_ring(smurf["members"], smurf["pattern_type"], smurf["risk_score"])
        _entry(smurf["aggregator"]).record(
            "smurf_aggregator", ring_id, SCORE_SMURF_AGGREGATOR
        )
        for participant in smurf["participants"]:
            _entry(participant).record(
                "smurf_participant", ring_id, SCORE_SMURF_PARTICIPANT
            )

    # ── Shell Networks ────────────────────────────────────────────────
    for chain in shell_chains:
        ring_id = _new_ring(chain["members"], "shell_network", chain["risk_score"])
        for account in chain["intermediates"]:
            _entry(account).record(
                "shell_intermediate", ring_id, SCORE_SHELL_INTERMEDIATE
            )

    return fraud_rings, ledger
