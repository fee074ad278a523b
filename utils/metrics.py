"""
Detection statistics tracker.

Aggregates results across uploads for the /metrics endpoint: run count,
accounts and transactions analyzed, accounts flagged, and fraud rings per
pattern type, plus the summary of the most recent run.

Time Complexity: O(R) per record, R = rings in the run
Memory: O(P) where P = distinct pattern types
"""

import threading
from collections import Counter
from typing import Any, Dict, List


class MetricsTracker:
    """Thread-safe accumulator of detection statistics across API calls."""

    def __init__(self):
        self._lock = threading.Lock()
        self._total_runs = 0
        self._accounts_analyzed = 0
        self._transactions_analyzed = 0
        self._accounts_flagged = 0
        self._rings_by_pattern: Counter = Counter()
        self._last_run: Dict[str, Any] = {}

    def record(self, summary: Dict[str, Any], fraud_rings: List[Dict[str, Any]]) -> None:
        """Record one processing run."""
        with self._lock:
            self._total_runs += 1
            self._accounts_analyzed += int(summary.get("total_accounts_analyzed", 0))
            self._transactions_analyzed += int(summary.get("total_transactions", 0))
            self._accounts_flagged += int(summary.get("suspicious_accounts_flagged", 0))
            self._rings_by_pattern.update(r["pattern_type"] for r in fraud_rings)
            self._last_run = dict(summary)

    def get_metrics(self) -> Dict[str, Any]:
        """Return the accumulated metrics."""
        with self._lock:
            if not self._total_runs:
                return {"status": "no_processing_yet", "total_runs": 0}
            return {
                "status": "ready",
                "total_runs": self._total_runs,
                "total_accounts_analyzed": self._accounts_analyzed,
                "total_transactions_analyzed": self._transactions_analyzed,
                "total_accounts_flagged": self._accounts_flagged,
                "rings_by_pattern": dict(self._rings_by_pattern),
                "last_run": dict(self._last_run),
            }
