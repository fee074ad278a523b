"""
Fan-In Detection — Aggregator pattern.

≥10 unique senders → 1 receiver within any rolling 72h window.
"""

from typing import Any, Dict, List

import pandas as pd

from app.config import (
    RING_RISK_SMURFING,
    SMURFING_MIN_COUNTERPARTIES,
    SMURFING_WINDOW_HOURS,
)
from utils.time_utils import sliding_window_counterparties


def detect_fan_in(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Detect fan-in aggregator patterns.

    Args:
        df: Transaction DataFrame sorted by timestamp (stable)

    Returns:
        One ring candidate per qualifying receiver, in first-appearance order.
    """
    rings: List[Dict[str, Any]] = []

    for receiver, group in df.groupby("receiver_id", sort=False):
        if group["sender_id"].nunique() < SMURFING_MIN_COUNTERPARTIES:
            continue

        senders = sliding_window_counterparties(
            group["timestamp"].to_numpy(dtype="datetime64[ns]"),
            group["sender_id"].astype(str).tolist(),
            SMURFING_WINDOW_HOURS,
            SMURFING_MIN_COUNTERPARTIES,
        )
        if len(senders) < SMURFING_MIN_COUNTERPARTIES:
            continue

        aggregator = str(receiver)
        rings.append(
            {
                "pattern_type": "fan_in_smurfing",
                "aggregator": aggregator,
                "participants": senders,
                "members": [aggregator] + senders,
                "risk_score": RING_RISK_SMURFING,
            }
        )

    return rings
