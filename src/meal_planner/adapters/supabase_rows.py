"""Row conversion helpers shared by the Supabase repositories."""

from datetime import date, datetime
from enum import Enum
from uuid import UUID


def to_row(value: object) -> object:
    """Convert a payload into JSON-compatible values for PostgREST."""
    if isinstance(value, dict):
        return {key: to_row(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_row(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, date | datetime):
        return value.isoformat()
    return value


def parse_uuid(value: object) -> UUID | None:
    """Parse an optional UUID column."""
    if value is None or value == "":
        return None
    return UUID(str(value))


def parse_date(value: object) -> date | None:
    """Parse an optional date column, ignoring any time component."""
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def parse_datetime(value: object) -> datetime | None:
    """Parse an optional timestamp column."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
