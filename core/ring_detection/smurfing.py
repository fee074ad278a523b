"""
Smurfing Detection — Combined Fan-In / Fan-Out.

Wraps fan_in and fan_out modules into a single entry point.
Transactions are stably sorted by timestamp before either pass runs.

Time Complexity: O(n × k) where n = transactions, k = transactions per window
Memory: O(n)
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from core.ring_detection.fan_in import detect_fan_in
from core.ring_detection.fan_out import detect_fan_out
from utils.time_utils import sort_by_timestamp

logger = logging.getLogger(__name__)


def detect_smurfing(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Detect smurfing patterns (fan-in aggregators and fan-out dispersers).

    Returns:
        Fan-in ring candidates followed by fan-out ring candidates.
    """
    if df.empty:
        return []

    ordered = sort_by_timestamp(df)
    fan_in_rings = detect_fan_in(ordered)
    fan_out_rings = detect_fan_out(ordered)

    logger.debug(
        "Smurfing detection: fan_in=%d fan_out=%d",
        len(fan_in_rings),
        len(fan_out_rings),
    )
    return fan_in_rings + fan_out_rings
