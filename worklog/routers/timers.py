"""Timer endpoints - the active work session."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from worklog.database import get_database
from worklog.exceptions import AlreadyActiveError
from worklog.models.time_entry import WorkEntry
from worklog.services.timer_service import TimerService
from worklog.utils.clock import get_now
from worklog.utils.time import format_duration, hours_between, to_local


router = APIRouter(prefix="/timers", tags=["timers"])


class TimerStart(BaseModel):
    """Request model for starting a timer."""

    notes: Optional[str] = None


class TimerStatus(BaseModel):
    """Running session with its elapsed time at the current tick."""

    entry: WorkEntry
    elapsed_hours: float
    hours: int
    minutes: int


@router.post("/start", response_model=WorkEntry)
async def start_timer(
    timer_start: Optional[TimerStart] = None,
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """
    Start a new session.

    - Only one session can run at a time
    """
    service = TimerService(db)
    try:
        return service.start_timer(
            now=now,
            notes=timer_start.notes if timer_start else None,
        )
    except AlreadyActiveError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/stop", response_model=WorkEntry)
async def stop_timer(
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """
    Stop the running session and store it as an entry.

    - Must have a running session
    """
    service = TimerService(db)
    try:
        return service.stop_timer(now=now)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/current", response_model=TimerStatus)
async def get_current_timer(
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """
    Get the running session and how long it has been running.

    - Returns 404 if no session is running
    """
    service = TimerService(db)
    entry = service.get_current_timer()

    if not entry:
        raise HTTPException(status_code=404, detail="No timer running")

    now = to_local(now)
    hours, minutes = format_duration(entry.start, now)
    return TimerStatus(
        entry=entry,
        elapsed_hours=hours_between(entry.start, now),
        hours=hours,
        minutes=minutes,
    )
