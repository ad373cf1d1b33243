"""Date utilities for gastos.

Pure functions for parsing user-entered dates.
"""

from datetime import datetime

import pandas as pd


def parse_date_input(value: str) -> datetime:
    """Parse a user-entered date or date-time.

    Uses pandas.to_datetime for robust parsing - handles ISO, European
    (day first) and many other formats. Timezone-aware inputs are converted
    to naive local wall time.

    Args:
        value: Date string (e.g., "2024-03-15", "15/03/2024", "2024-03-15 18:30").

    Returns:
        Naive datetime.

    Raises:
        ValueError: If the value cannot be parsed as a date.
    """
    text = value.strip()
    if not text:
        raise ValueError("Date is empty")

    # ISO strings are unambiguous; dayfirst would swap month and day in some of them
    dayfirst = not (len(text) >= 10 and text[4] == "-" and text[7] == "-")
    try:
        timestamp = pd.to_datetime(text, dayfirst=dayfirst)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date {value!r}: {e}") from e

    if pd.isna(timestamp):
        raise ValueError(f"Invalid date {value!r}")
    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_localize(None)
    return timestamp.to_pydatetime()
