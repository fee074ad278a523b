"""
HTTP layer tests: upload, stored analysis lookup, health, and metrics.
"""

import os
import sys
import threading

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from app.main import app
from utils.analysis_store import AnalysisStore
from utils.metrics import MetricsTracker


def _csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def _cycle_csv() -> bytes:
    return _csv_bytes(
        pd.DataFrame(
            {
                "transaction_id": ["T1", "T2", "T3"],
                "sender_id": ["ACC_001", "ACC_002", "ACC_003"],
                "receiver_id": ["ACC_002", "ACC_003", "ACC_001"],
                "amount": [100.0, 100.0, 100.0],
                "timestamp": [
                    "2024-01-10 10:00:00",
                    "2024-01-10 11:00:00",
                    "2024-01-10 12:00:00",
                ],
            }
        )
    )


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


class TestUpload:
    def test_upload_returns_analysis(self, client):
        resp = client.post("/upload", files={"file": ("tx.csv", _cycle_csv(), "text/csv")})
        assert resp.status_code == 200
        body = resp.json()
        assert body["analysis_id"]
        assert body["total_accounts"] == 3
        assert body["total_transactions"] == 3
        assert body["fraud_rings_detected"] == len(body["data"]["fraud_rings"])
        assert body["suspicious_accounts_flagged"] == 3
        assert body["data"]["fraud_rings"][0]["ring_id"] == "RING-001"
        assert body["data"]["fraud_rings"][0]["pattern_type"] == "cycle"
        assert {n["id"] for n in body["graph"]["nodes"]} == {"ACC_001", "ACC_002", "ACC_003"}
        assert len(body["graph"]["links"]) == 3

    def test_stored_analysis_matches_upload(self, client):
        body = client.post(
            "/upload", files={"file": ("tx.csv", _cycle_csv(), "text/csv")}
        ).json()
        resp = client.get(f"/analysis/{body['analysis_id']}")
        assert resp.status_code == 200
        assert resp.json() == body["data"]

    def test_unknown_analysis(self, client):
        resp = client.get("/analysis/does-not-exist")
        assert resp.status_code == 404

    def test_rejects_non_csv(self, client):
        resp = client.post("/upload", files={"file": ("tx.txt", b"abc", "text/plain")})
        assert resp.status_code == 400

    def test_rejects_missing_column(self, client):
        data = b"transaction_id,sender_id,receiver_id,timestamp\nT1,A,B,2024-01-10 10:00:00\n"
        resp = client.post("/upload", files={"file": ("tx.csv", data, "text/csv")})
        assert resp.status_code == 400
        assert "amount" in resp.json()["detail"]

    def test_rejects_empty_file(self, client):
        resp = client.post("/upload", files={"file": ("tx.csv", b"", "text/csv")})
        assert resp.status_code == 400

    def test_rejects_header_only(self, client):
        data = b"transaction_id,sender_id,receiver_id,amount,timestamp\n"
        resp = client.post("/upload", files={"file": ("tx.csv", data, "text/csv")})
        assert resp.status_code == 400

    def test_metrics_after_upload(self, client):
        client.post("/upload", files={"file": ("tx.csv", _cycle_csv(), "text/csv")})
        metrics = client.get("/metrics").json()
        assert metrics["status"] == "ready"
        assert metrics["total_runs"] >= 1
        assert metrics["last_run"]["total_accounts_analyzed"] == 3
        assert metrics["rings_by_pattern"]["cycle"] >= 1
        assert metrics["total_accounts_flagged"] >= 3

    def test_rejects_infinite_amount(self, client):
        data = b"transaction_id,sender_id,receiver_id,amount,timestamp\n1,a,b,1e999,2024-01-01 00:00:00\n"
        resp = client.post("/upload", files={"file": ("tx.csv", data, "text/csv")})
        assert resp.status_code == 400
        assert "finite" in resp.json()["detail"]


class TestMetricsTracker:
    def test_empty(self):
        assert MetricsTracker().get_metrics() == {"status": "no_processing_yet", "total_runs": 0}

    def test_accumulates_runs(self):
        tracker = MetricsTracker()
        summary = {
            "total_accounts_analyzed": 3,
            "total_transactions": 3,
            "suspicious_accounts_flagged": 3,
            "fraud_rings_detected": 2,
        }
        rings = [{"pattern_type": "cycle"}, {"pattern_type": "shell_network"}]
        tracker.record(summary, rings)
        tracker.record(summary, rings[:1])
        metrics = tracker.get_metrics()
        assert metrics["total_runs"] == 2
        assert metrics["total_accounts_analyzed"] == 6
        assert metrics["total_transactions_analyzed"] == 6
        assert metrics["total_accounts_flagged"] == 6
        assert metrics["rings_by_pattern"] == {"cycle": 2, "shell_network": 1}
        assert metrics["last_run"] == summary

    def test_concurrent_records(self):
        tracker = MetricsTracker()
        summary = {"total_accounts_analyzed": 1, "total_transactions": 1, "suspicious_accounts_flagged": 1}

        def worker():
            for _ in range(200):
                tracker.record(summary, [{"pattern_type": "cycle"}])

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        metrics = tracker.get_metrics()
        assert metrics["total_runs"] == 1600
        assert metrics["rings_by_pattern"]["cycle"] == 1600


class TestAnalysisStore:
    def test_save_and_get(self):
        store = AnalysisStore(max_entries=5)
        analysis_id = store.save({"fraud_rings": []}, filename="a.csv")
        assert store.get(analysis_id) == {"fraud_rings": []}
        assert store.get("missing") is None

    def test_evicts_oldest(self):
        store = AnalysisStore(max_entries=2)
        first = store.save({"n": 1})
        second = store.save({"n": 2})
        third = store.save({"n": 3})
        assert len(store) == 2
        assert store.get(first) is None
        assert store.get(second) == {"n": 2}
        assert store.get(third) == {"n": 3}
