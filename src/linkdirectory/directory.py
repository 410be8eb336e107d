# directory.py

from datetime import datetime, timezone
from typing import Optional

PENDING = "Pending"
APPROVED = "Approved"

# Column positions in a stored row
TIMESTAMP, LINK, TITLE, DESCRIPTION, STATUS = range(5)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 in UTC with milliseconds and a Z suffix, e.g. 2024-05-01T12:34:56.789Z"""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_row(link: str, enriched: Optional[dict], timestamp: Optional[datetime] = None) -> list:
    """
    Builds the row stored for a new submission:
    Timestamp, Link, Title, Description, Status
    """
    enriched = enriched or {}

    return [
        format_timestamp(timestamp),          # Timestamp
        link,                                 # Original Link
        enriched.get("title") or "",          # Enriched Title
        enriched.get("description") or "",    # Enriched Description
        PENDING,                              # Status
    ]


def is_approved(row: list) -> bool:
    # Rows come back trimmed of trailing blanks, so a short row has no status
    return len(row) > STATUS and row[STATUS] == APPROVED


def row_to_entry(row: list) -> dict:
    padded = (list(row) + [""] * STATUS)[:STATUS]
    return {
        "timestamp": padded[TIMESTAMP],
        "link": padded[LINK],
        "title": padded[TITLE],
        "description": padded[DESCRIPTION],
    }


def approved_entries(rows: list[list]) -> list[dict]:
    """Keep rows whose status is exactly "Approved", in stored order, without the status."""
    return [row_to_entry(row) for row in rows if is_approved(row)]
