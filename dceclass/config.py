# dceclass/config.py
"""
Runtime configuration, read once from the environment (and a local .env).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("DCE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# =============================================================================
# MATCH RESOLUTION
# =============================================================================

# Below this, a result is reported as OTHER with exactly this confidence.
MIN_CONFIDENCE = float(os.getenv("DCE_MIN_CONFIDENCE", "0.3"))

# Lower bound for confidence after the close-race penalty.
CLOSE_RACE_FLOOR = float(os.getenv("DCE_CLOSE_RACE_FLOOR", "0.0"))

CLEAR_SEPARATION = 0.3
CLEAR_SEPARATION_BONUS = 0.1
CLOSE_SEPARATION = 0.1
CLOSE_SEPARATION_PENALTY = 0.2

# =============================================================================
# BATCH / API LIMITS
# =============================================================================

BATCH_MAX_WORKERS = int(os.getenv("DCE_BATCH_MAX_WORKERS", "4"))
BATCH_MAX_DOCUMENTS = int(os.getenv("DCE_BATCH_MAX_DOCUMENTS", "10"))
MAX_FILE_SIZE_BYTES = int(os.getenv("DCE_MAX_FILE_SIZE_BYTES", str(50 * 1024 * 1024)))

if not 0.0 <= MIN_CONFIDENCE <= 1.0:
    raise ValueError(f"DCE_MIN_CONFIDENCE must be in [0,1], got {MIN_CONFIDENCE}")
if not 0.0 <= CLOSE_RACE_FLOOR <= 1.0:
    raise ValueError(f"DCE_CLOSE_RACE_FLOOR must be in [0,1], got {CLOSE_RACE_FLOOR}")
if BATCH_MAX_WORKERS < 1:
    raise ValueError(f"DCE_BATCH_MAX_WORKERS must be >= 1, got {BATCH_MAX_WORKERS}")
