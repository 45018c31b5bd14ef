"""
Survey reporting.

Builds per-survey breakdown tables and exports them as CSV with a JSON
metadata sidecar.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict

import pandas as pd

from nps.survey.survey import Survey

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "Survey", "Responses", "Promoters", "Passives", "Detractors",
    "Promoter %", "Detractor %", "NPS"
]


def breakdown_table(surveys: Dict[str, Survey]) -> pd.DataFrame:
    """
    Build a breakdown table with one row per survey.

    Args:
        surveys: Survey name -> Survey

    Returns:
        DataFrame with REPORT_COLUMNS, sorted by NPS (descending)
    """
    rows = []
    for name, survey in surveys.items():
        breakdown = survey.breakdown()
        rows.append({
            "Survey": name,
            "Responses": breakdown.total,
            "Promoters": breakdown.promoters,
            "Passives": breakdown.passives,
            "Detractors": breakdown.detractors,
            "Promoter %": round(breakdown.promoter_percent, 1),
            "Detractor %": round(breakdown.detractor_percent, 1),
            "NPS": survey.score()
        })

    if not rows:
        logger.warning("No surveys given, creating empty breakdown table")
        return pd.DataFrame(columns=REPORT_COLUMNS)

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    return df.sort_values("NPS", ascending=False, kind="stable").reset_index(drop=True)


def export_report(
    surveys: Dict[str, Survey],
    output_dir: str,
    report_name: str
) -> str:
    """
    Write the breakdown table to CSV plus a metadata JSON file.

    Args:
        surveys: Survey name -> Survey
        output_dir: Directory to write into (created if missing)
        report_name: Base file name without extension

    Returns:
        Path to generated CSV file
    """
    df = breakdown_table(surveys)

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"{report_name}.csv")
    df.to_csv(output_path, index=False)
    logger.info(f"Report saved to {output_path} ({len(df)} surveys)")

    metadata_path = os.path.join(output_dir, f"{report_name}_metadata.json")
    metadata = {
        "report_name": report_name,
        "survey_count": len(surveys),
        "total_responses": int(df["Responses"].sum()) if not df.empty else 0,
        "surveys": {name: survey.breakdown().to_dict() for name, survey in surveys.items()},
        "generated_at": datetime.now(timezone.utc).isoformat()
    }
    with open(metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)

    logger.info(f"Metadata saved to {metadata_path}")

    return output_path
