"""Shared FastAPI dependencies."""

from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, HTTPException, Query, Request, status

from health_tracker.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def timezone_param(timezone: str = Query(default="UTC")) -> str:
    """Validate an IANA timezone name passed as a query parameter."""
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown timezone: {timezone}",
        ) from exc
    return timezone


Container = Annotated[AppContainer, Depends(get_container)]
TimezoneName = Annotated[str, Depends(timezone_param)]
