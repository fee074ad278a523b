"""
Detection Engine Configuration.

Policy constants for the three detectors and the additive scoring model,
plus deployment knobs read from the environment.
"""

import os

# ── Cycle Detection ───────────────────────────────────────────────────
MIN_CYCLE_LENGTH = 3
MAX_CYCLE_LENGTH = 5

# ── Smurfing (fan-in / fan-out) ───────────────────────────────────────
SMURFING_WINDOW_HOURS = 72
SMURFING_MIN_COUNTERPARTIES = 10

# ── Shell Networks ────────────────────────────────────────────────────
SHELL_MAX_DEPTH = 4
SHELL_MIN_CHAIN_LENGTH = 3
SHELL_MAX_TRANSACTIONS = 3

# ── Ring Risk Scores ──────────────────────────────────────────────────
RING_RISK_CYCLE = 90
RING_RISK_SMURFING = 85
RING_RISK_SHELL = 75

RING_ID_PREFIX = "RING-"

# ── Partial Suspicion Scores ──────────────────────────────────────────
SCORE_CYCLE = 40
SCORE_SMURF_AGGREGATOR = 35
SCORE_SMURF_PARTICIPANT = 20
SCORE_SHELL_INTERMEDIATE = 30

# ── Behavioural Bonuses ───────────────────────────────────────────────
HIGH_VELOCITY_THRESHOLD = 20
SCORE_HIGH_VELOCITY = 15
LARGE_AMOUNT_THRESHOLD = 5000.0
SCORE_LARGE_AMOUNT = 10

MAX_SUSPICION_SCORE = 100

# ── False Positive Control ────────────────────────────────────────────
LEGIT_MIN_TRANSACTIONS = 50
LEGIT_MIN_COUNTERPARTIES = 20

# ── Deployment ────────────────────────────────────────────────────────
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
MAX_STORED_ANALYSES = int(os.getenv("MAX_STORED_ANALYSES", "100"))
