"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer
    from health_tracker.services.analytics import AnalyticsService

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _analytics(request: Request) -> AnalyticsService:
    container: AppContainer = request.app.state.container
    if container.analytics_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analytics export is not configured",
        )
    return container.analytics_service


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post("/analytics/export", dependencies=[Depends(require_admin)])
async def export_analytics(request: Request) -> dict[str, object]:
    """Export yesterday's anonymised data to storage and the warehouse."""
    result = _analytics(request).export_daily()
    return {
        "export_date": result.export_date.isoformat(),
        "file_name": result.file_name,
        "record_counts": result.record_counts,
    }


@router.get("/analytics/trends/{kind}", dependencies=[Depends(require_admin)])
async def analytics_trends(
    kind: Literal["nutrition", "exercise", "sleep"],
    request: Request,
    days: int = Query(default=30, ge=1, le=365),
) -> dict[str, object]:
    """Return population trends from the warehouse."""
    service = _analytics(request)
    queries = {
        "nutrition": service.nutrition_trends,
        "exercise": service.exercise_trends,
        "sleep": service.sleep_trends,
    }
    return {"kind": kind, "days": days, "rows": queries[kind](days)}
