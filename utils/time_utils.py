"""
Time utility functions for sliding window and time span calculations.

Time Complexity: O(n log n) for sorting-based operations
Memory: O(n) for sorted copies
"""

from typing import Dict, List, Sequence

import numpy as np
import pandas as pd


def sort_by_timestamp(df: pd.DataFrame, time_col: str = "timestamp") -> pd.DataFrame:
    """Stable sort by timestamp; rows sharing a timestamp keep input order."""
    df = df.copy()
    df[time_col] = pd.to_datetime(df[time_col])
    return df.sort_values(time_col, kind="stable").reset_index(drop=True)


def sliding_window_counterparties(
    times: np.ndarray,
    counterparties: Sequence[str],
    window_hours: int,
    threshold: int,
) -> List[str]:
    """
    Collect counterparties from every window that reaches `threshold`.

    Each transaction starts a window that extends forward while the gap to
    the window start is at most `window_hours`. Once a window holds
    `threshold` unique counterparties, its whole member set is merged into
    the result; overlapping qualifying windows all contribute.

    Args:
        times: datetime64 array sorted ascending
        counterparties: account id per transaction, aligned with `times`

    Returns:
        Counterparty ids in first-seen order.

    Time Complexity: O(n × k) where k = transactions per window
    """
    window = np.timedelta64(window_hours, "h")
    collected: Dict[str, None] = {}

    for i in range(len(times)):
        members: Dict[str, None] = {}
        for j in range(i, len(times)):
            if times[j] - times[i] > window:
                break
            members[counterparties[j]] = None
            if len(members) >= threshold:
                collected.update(members)

    return list(collected)
