"""Shared FastAPI dependencies."""

from datetime import UTC, date, datetime
from uuid import UUID

from fastapi import Header, HTTPException, status


def current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's id as forwarded by the upstream auth layer."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no user",
        )
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, invalid user",
        ) from exc


def utc_today() -> date:
    """Return today's calendar date in UTC."""
    return datetime.now(UTC).date()
