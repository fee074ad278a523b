"""
FastAPI application for the Graph-Based Money Muling Detection Engine.

Endpoints:
    POST /upload               — Accept CSV, return detection results as JSON
    GET  /analysis/{id}        — Fetch a stored analysis report
    GET  /health               — System health check
    GET  /metrics              — Processing statistics

Memory: O(V + E) during processing, released after response
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from app.config import APP_VERSION, CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Graph-Based Money Muling Detection Engine",
    description="Detects money muling rings using graph-based analysis of transaction data.",
    version=APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

logger.info("Money muling detection engine initialised (version %s)", APP_VERSION)
