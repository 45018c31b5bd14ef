"""
Response loading.

Reads (respondent_id, rating) pairs from CSV files and parses compact
"rating:quantity" lists for bulk ingestion.
"""

import logging
import os
from typing import Any, List, Optional, Tuple

import pandas as pd

import config.settings as settings

logger = logging.getLogger(__name__)


def _parse_rating(value: Any) -> Any:
    """
    Convert one rating cell.

    Integer-looking text ("9", "9.0") becomes an int, blanks become None and
    anything else is returned unchanged so the Survey can reject it.
    """
    if pd.isna(value):
        return None

    text = value.strip()
    # int() and float() accept digit separators such as "1_0"
    if "_" in text:
        return value

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        return value

    if number.is_integer():
        return int(number)
    return value


def _parse_ids(values: List[Any]) -> List[Optional[Any]]:
    """
    Convert the id column.

    Ids stay text unless every one of them round-trips through int
    unchanged, so "007" and "7" are never merged.
    """
    ids = [None if pd.isna(value) else value for value in values]
    if ids and all(_is_plain_int(i) for i in ids):
        return [int(i) for i in ids]
    return ids


def _is_plain_int(value: Optional[str]) -> bool:
    """True for text such as "7" or "-3"; False for "007", "+7", " 7" or None."""
    if value is None:
        return False
    try:
        return str(int(value)) == value
    except ValueError:
        return False


def load_responses_csv(
    path: str,
    id_column: str = settings.DEFAULT_ID_COLUMN,
    rating_column: str = settings.DEFAULT_RATING_COLUMN
) -> List[Tuple[Any, Any]]:
    """
    Load (respondent_id, rating) pairs from a CSV file.

    Every cell is read as text and converted on its own. Ratings are passed
    through without range checks; bad ratings are reported by the Survey
    when the pairs are added.

    Args:
        path: Path to CSV file with a header row
        id_column: Name of the respondent id column
        rating_column: Name of the rating column

    Returns:
        List of (respondent_id, rating) pairs in file order

    Raises:
        FileNotFoundError: If path doesn't exist
        ValueError: If either column is missing
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Responses file not found: {path}")

    df = pd.read_csv(path, dtype=str)

    missing = [col for col in (id_column, rating_column) if col not in df.columns]
    if missing:
        raise ValueError(
            f"Missing column(s) {missing} in {path}. Found: {list(df.columns)}"
        )

    respondent_ids = _parse_ids(df[id_column].tolist())
    ratings = [_parse_rating(value) for value in df[rating_column].tolist()]
    pairs = list(zip(respondent_ids, ratings))

    logger.info(f"Loaded {len(pairs)} responses from {path}")
    return pairs


def parse_rating_quantities(text: str) -> List[Tuple[int, int]]:
    """
    Parse bulk rating quantities such as "9:10,7:3,0:2".

    Args:
        text: Comma-separated rating:quantity entries

    Returns:
        List of (rating, quantity) tuples

    Raises:
        ValueError: If an entry is malformed or a quantity is negative
    """
    pairs = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split(":")
        if len(parts) != 2:
            raise ValueError(f"Invalid entry '{entry}'. Expected rating:quantity")

        try:
            rating, quantity = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Invalid entry '{entry}'. Rating and quantity must be integers")

        if quantity < 0:
            raise ValueError(f"Invalid entry '{entry}'. Quantity must be non-negative")

        pairs.append((rating, quantity))

    if not pairs:
        raise ValueError(f"No rating:quantity entries found in '{text}'")

    return pairs


# Design Rationale and Trade-offs:
#
# 1. Cells are read as text
#    - Ratings are converted one cell at a time; a bad cell never changes
#      how the rest of the column is read
#    - Ids become ints only when every id converts without loss
#    - Trade-off: a single non-numeric id keeps all ids as strings
#
# 2. No range checks here
#    - Out-of-range and non-numeric ratings pass through unchanged
#    - The Survey reports them with the respondent id attached
