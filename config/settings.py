"""
Configuration settings for the NPS toolkit.

Centralized configuration for rating bounds, id generation, reporting and logging.
"""

import os

# Rating scale (inclusive bounds)
MIN_RATING = 0
MAX_RATING = 10

# Classification thresholds
PASSIVE_MIN_RATING = 7  # 7-8 are passives
PROMOTER_MIN_RATING = 9  # 9-10 are promoters, everything below 7 is a detractor

# Respondent id generation
AUTO_ID_START = 1
DEFAULT_ID_PREFIX = "respondent_"

# CSV ingestion
DEFAULT_ID_COLUMN = "respondent_id"
DEFAULT_RATING_COLUMN = "rating"

# Reporting
DEFAULT_REPORT_NAME = "nps_report"

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(value) -> str:
    """Normalize a log level name; unknown or empty values fall back to INFO."""
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.getenv("NPS_LOG_LEVEL"))


# Design Rationale and Trade-offs:
#
# 1. Rating scale and thresholds
#    - 0-10 inclusive; 9-10 promoter, 7-8 passive, 0-6 detractor
#    - Every validation and classification reads these constants
#    - Trade-off: changing them changes every score computed afterwards
#
# 2. NPS_LOG_LEVEL
#    - Only DEBUG, INFO, WARNING and ERROR are accepted (case-insensitive)
#    - Anything else falls back to INFO instead of failing at startup
#    - Trade-off: a misspelled level is silently ignored
#
# 3. Auto ids
#    - AUTO_ID_START applies to every add_bulk_responses_auto_id call
#    - Trade-off: repeated calls on one survey reuse ids 1..Q and overwrite
