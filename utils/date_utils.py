import pandas as pd
from datetime import datetime, date as dt_date
from typing import Any, List, Union


def normalise_date(input_date):
    """
    Convert input to a datetime.date object.
    Supports formats like:
      - 'Mon 2025-07-07', '2025/07/07', '20250707', etc.
    """
    if isinstance(input_date, dt_date) and not isinstance(input_date, datetime):
        return input_date
    elif isinstance(input_date, pd.Timestamp):
        return input_date.date()
    elif isinstance(input_date, datetime):
        return input_date.date()
    elif isinstance(input_date, str):
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            return pd.to_datetime(input_date, errors="raise").date()
        except Exception as e:
            raise ValueError(f"Could not parse date string '{input_date}': {e}")
    raise ValueError(f"Unsupported date type: {type(input_date)}")


def date_range(
    start: Union[pd.Timestamp, dt_date, str], end: Union[pd.Timestamp, dt_date, str]
) -> List[dt_date]:
    """Return every calendar day from start to end, both inclusive, in ascending order."""
    start_d, end_d = normalise_date(start), normalise_date(end)
    if start_d > end_d:
        return []
    return [ts.date() for ts in pd.date_range(start_d, end_d, freq="D")]


def num_days_between(start: Any, end: Any) -> int:
    """Number of days in the inclusive range [start, end]."""
    return (normalise_date(end) - normalise_date(start)).days + 1


def compute_day_offset(label: Any, date_start: dt_date) -> int:
    """Given a date-like label, return its day-index offset from date_start."""
    return (normalise_date(label) - date_start).days
