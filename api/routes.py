"""
API Routes — upload, analysis lookup, health, and metrics endpoints.
"""

import io
import logging

import pandas as pd
from fastapi import APIRouter, File, HTTPException, UploadFile

from app.config import APP_VERSION
from services.processing_pipeline import ProcessingService
from utils.analysis_store import AnalysisStore
from utils.metrics import MetricsTracker
from utils.validators import validate_csv

logger = logging.getLogger(__name__)

router = APIRouter()
metrics_tracker = MetricsTracker()
analysis_store = AnalysisStore()


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": APP_VERSION}


@router.get("/metrics")
async def metrics():
    """Return processing statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@router.post("/upload")
def upload_csv(file: UploadFile = File(...)):
    """
    Accept CSV upload, perform graph-based money muling detection,
    store the report, and return it with its analysis id.
    """
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are accepted.")

    try:
        contents = file.file.read()
        df = pd.read_csv(io.StringIO(contents.decode("utf-8-sig")), dtype=str)
    except (UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=f"Failed to parse CSV: {str(e)}")

    validation_error = validate_csv(df)
    if validation_error:
        logger.warning("Rejected upload %s: %s", file.filename, validation_error)
        raise HTTPException(status_code=400, detail=validation_error)

    result = ProcessingService().process(df)
    graph_data = result.pop("graph")
    summary = result["summary"]

    metrics_tracker.record(summary, result["fraud_rings"])
    analysis_id = analysis_store.save(result, filename=file.filename)

    return {
        "analysis_id": analysis_id,
        "total_accounts": summary["total_accounts_analyzed"],
        "total_transactions": summary["total_transactions"],
        "suspicious_accounts_flagged": summary["suspicious_accounts_flagged"],
        "fraud_rings_detected": summary["fraud_rings_detected"],
        "processing_time_seconds": summary["processing_time_seconds"],
        "data": result,
        "graph": graph_data,
    }


@router.get("/analysis/{analysis_id}")
async def get_analysis(analysis_id: str):
    """Return the stored report for a previous upload."""
    report = analysis_store.get(analysis_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Analysis not found.")
    return report
