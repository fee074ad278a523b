"""
Processing Pipeline — Full Pipeline Orchestrator.

Coordinates the complete detection pipeline:
   1. Normalize columns & build directed multigraph
   2. Cycle detection
   3. Smurfing detection (fan-in / fan-out)
   4. Shell chain detection
   5. Ring assembly (sequential RING-NNN ids, account ledger)
   6. False positive control + suspicion scoring
   7. Summary + graph visualization data
   8. Format JSON output

Detectors only read the graph; findings are folded into the ledger in a
fixed order (cycles, smurfing, shell) after all of them finish.

Memory: O(V + E) for graph + O(R) for rings.
"""

import contextlib
import logging
import time
from typing import Any, Dict

import networkx as nx
import pandas as pd

from core.graph.graph_builder import build_graph
from core.graph.graph_metrics import build_graph_data, compute_graph_summary
from core.output.json_formatter import format_output
from core.output.summary_builder import build_summary
from core.ring_detection.ring_aggregator import assemble_rings
from core.ring_detection.smurfing import detect_smurfing
from core.risk.base_scoring import score_accounts
from core.structural.cycle_detection import detect_cycles
from core.structural.shell_detection import detect_shell_chains

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


def prepare_transactions(df: pd.DataFrame) -> pd.DataFrame:
    """Copy the frame with string ids, float amounts, and parsed timestamps."""
    df = df.copy()
    for col in ("transaction_id", "sender_id", "receiver_id"):
        df[col] = df[col].astype(str).str.strip()
    df["amount"] = pd.to_numeric(df["amount"]).astype(float)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df


def detect_fraud(G: nx.MultiDiGraph, df: pd.DataFrame) -> Dict[str, Any]:
    """
    Run the three detectors and fuse their findings.

    Args:
        G: graph built from `df`
        df: prepared transaction DataFrame

    Returns:
        {"fraud_rings": [...], "suspicious_accounts": [...]}
    """
    with log_timer("cycle_detection"):
        cycles = detect_cycles(G)

    with log_timer("smurfing_detection"):
        smurf_rings = detect_smurfing(df)

    with log_timer("shell_detection"):
        shell_chains = detect_shell_chains(G)

    with log_timer("ring_assembly"):
        fraud_rings, ledger = assemble_rings(cycles, smurf_rings, shell_chains)

    with log_timer("scoring"):
        suspicious_accounts = score_accounts(G, ledger)

    logger.info(
        "Detection: cycles=%d smurfing=%d shell=%d suspicious=%d",
        len(cycles),
        len(smurf_rings),
        len(shell_chains),
        len(suspicious_accounts),
    )
    return {"fraud_rings": fraud_rings, "suspicious_accounts": suspicious_accounts}


class ProcessingService:
    """Orchestrates the complete money-muling detection pipeline."""

    def detect(self, df: pd.DataFrame) -> Dict[str, Any]:
        """Core analysis only: fraud rings and scored suspicious accounts."""
        df = prepare_transactions(df)
        return detect_fraud(build_graph(df), df)

    def process(self, df: pd.DataFrame) -> Dict[str, Any]:
        """
        Run the full pipeline on validated transaction data.

        Returns:
            JSON-compatible dict with suspicious_accounts, fraud_rings,
            summary, and graph
        """
        t_start = time.time()
        df = prepare_transactions(df)

        with log_timer("graph_build"):
            G = build_graph(df)
        logger.info("Graph stats: %s", compute_graph_summary(G))

        detection = detect_fraud(G, df)

        with log_timer("graph_export"):
            graph_data = build_graph_data(G, df, detection["suspicious_accounts"])

        summary = build_summary(
            total_accounts=G.number_of_nodes(),
            total_transactions=len(df),
            suspicious_count=len(detection["suspicious_accounts"]),
            rings_count=len(detection["fraud_rings"]),
            processing_time=time.time() - t_start,
        )

        return format_output(
            suspicious_accounts=detection["suspicious_accounts"],
            fraud_rings=detection["fraud_rings"],
            summary=summary,
            graph_data=graph_data,
        )
