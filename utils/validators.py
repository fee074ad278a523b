"""
CSV structure validation.

Ensures uploaded CSV has the required columns with correct types and formats.

Time Complexity: O(n) where n = number of rows
Memory: O(1) additional beyond the DataFrame
"""

from typing import Optional

import numpy as np
import pandas as pd

REQUIRED_COLUMNS = [
    "transaction_id",
    "sender_id",
    "receiver_id",
    "amount",
    "timestamp",
]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def validate_csv(df: pd.DataFrame) -> Optional[str]:
    """
    Validate CSV structure. Returns error message if invalid, None if valid.

    Checks:
        1. All required columns present
        2. At least one row
        3. No null values in required columns
        4. Account ids are not blank
        5. 'amount' is numeric, finite, and non-negative
        6. 'timestamp' is parseable as YYYY-MM-DD HH:MM:SS
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        return f"Missing required columns: {', '.join(missing)}"

    if df.empty:
        return "CSV file is empty."

    null_cols = [col for col in REQUIRED_COLUMNS if df[col].isnull().any()]
    if null_cols:
        return f"Null values found in columns: {', '.join(null_cols)}"

    for col in ("sender_id", "receiver_id"):
        if (df[col].astype(str).str.strip() == "").any():
            return f"Column '{col}' contains blank account ids."

    try:
        amounts = pd.to_numeric(df["amount"], errors="raise")
    except (ValueError, TypeError):
        return "Column 'amount' must contain numeric values."
    if not np.isfinite(amounts.to_numpy(dtype=float)).all():
        return "Column 'amount' must contain finite values."
    if (amounts < 0).any():
        return "Column 'amount' must not contain negative values."

    try:
        pd.to_datetime(df["timestamp"], format=TIMESTAMP_FORMAT)
    except (ValueError, TypeError):
        return "Column 'timestamp' must be in format YYYY-MM-DD HH:MM:SS."

    return None
