"""
In-memory analysis store.

Keeps processed upload results keyed by a generated analysis id so the
frontend can fetch a report again without re-uploading. Nothing is
written to disk; the oldest entries are evicted past `max_entries`.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.config import MAX_STORED_ANALYSES

logger = logging.getLogger(__name__)


class AnalysisStore:
    """Thread-safe, bounded store of analysis results."""

    def __init__(self, max_entries: int = MAX_STORED_ANALYSES) -> None:
        self._max_entries = max(1, int(max_entries))
        self._entries: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def save(self, report: Dict[str, Any], filename: Optional[str] = None) -> str:
        analysis_id = str(uuid.uuid4())
        entry = {
            "filename": filename,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "report": report,
        }
        with self._lock:
            self._entries[analysis_id] = entry
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.info("Evicted analysis %s from store", evicted)
        return analysis_id

    def get(self, analysis_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            entry = self._entries.get(analysis_id)
        if entry is None:
            return None
        return entry["report"]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
