"""
Fan-Out Detection — Disperser pattern.

1 sender → ≥10 unique receivers within any rolling 72h window.
"""

from typing import Any, Dict, List

import pandas as pd

from app.config import (
    RING_RISK_SMURFING,
    SMURFING_MIN_COUNTERPARTIES,
    SMURFING_WINDOW_HOURS,
)
from utils.time_utils import sliding_window_counterparties


def detect_fan_out(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Detect fan-out disperser patterns.

    Args:
        df: Transaction DataFrame sorted by timestamp (stable)

    Returns:
        One ring candidate per qualifying sender, in first-appearance order.
    """
    rings: List[Dict[str, Any]] = []

    for sender, group in df.groupby("sender_id", sort=False):
        if group["receiver_id"].nunique() < SMURFING_MIN_COUNTERPARTIES:
            continue

        receivers = sliding_window_counterparties(
            group["timestamp"].to_numpy(dtype="datetime64[ns]"),
            group["receiver_id"].astype(str).tolist(),
            SMURFING_WINDOW_HOURS,
            SMURFING_MIN_COUNTERPARTIES,
        )
        if len(receivers) < SMURFING_MIN_COUNTERPARTIES:
            continue

        aggregator = str(sender)
        rings.append(
            {
                "pattern_type": "fan_out_smurfing",
                "aggregator": aggregator,
                "participants": receivers,
                "members": [aggregator] + receivers,
                "risk_score": RING_RISK_SMURFING,
            }
        )

    return rings
