"""API route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..core.config import Settings, get_settings
from ..utils.time import utc_now

router = APIRouter()


@router.get("/health", tags=["health"])
async def healthcheck(
    request: Request, settings: Settings = Depends(get_settings)
) -> dict[str, object]:
    """Health endpoint reporting the notifier schedule and scheduler state.

    The parsed schedule only exists once the lifespan has started; before that
    the configured expression is echoed back unparsed.
    """

    schedule = getattr(request.app.state, "schedule", None)
    scheduler = getattr(request.app.state, "scheduler", None)

    return {
        "status": "ok",
        "application": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "schedule": schedule.expression if schedule else settings.notifier_schedule,
        "interval_seconds": schedule.interval_seconds if schedule else None,
        "scheduler_running": bool(scheduler and scheduler.is_running),
        "past_due_ticks": scheduler.past_due_ticks if scheduler else 0,
        "timestamp_utc": utc_now().isoformat(),
    }
