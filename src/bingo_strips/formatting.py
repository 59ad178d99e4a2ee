from __future__ import annotations

from typing import Optional


def format_date(iso_date: Optional[str]) -> str:
    """Turn ``YYYY-MM-DD`` into ``DD/MM/YYYY`` for printing.

    Empty input gives an empty string; anything that is not three
    dash-separated parts is passed through untouched.
    """
    if not iso_date:
        return ""
    parts = iso_date.split("-")
    if len(parts) != 3 or not all(parts):
        return iso_date
    year, month, day = parts
    return f"{day}/{month}/{year}"
