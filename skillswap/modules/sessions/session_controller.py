# skillswap/modules/sessions/session_controller.py

import datetime as dt
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.auth.dependencies import CurrentUser, get_current_user
from skillswap.common.database.database import get_db_session
from skillswap.common.exceptions import MissingFieldError
from skillswap.common.utils.global_functions import resPayloadData
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.events.dispatcher import dispatcher
from skillswap.modules.sessions import schemas, session_service
from skillswap.modules.sessions.calendar_view import (
    NavigationDirection,
    advance_month,
    month_label,
    time_slots,
)
from skillswap.modules.sessions.session_store import BaseSessionStore, DatabaseSessionStore

router = APIRouter(prefix="/sessions", tags=["sessions"])

async def get_session_store(db: AsyncSession = Depends(get_db_session)) -> BaseSessionStore:
    return DatabaseSessionStore(db)

@router.get("", response_model=schemas.SessionListResponse)
async def list_sessions(
    current_user: CurrentUser = Depends(get_current_user),
    store: BaseSessionStore = Depends(get_session_store)
):
    """
    Retrieve the current user's sessions in chronological order.
    """
    sessions, notices = await session_service.get_sessions(current_user.id, store)
    return {"sessions": sessions, "notices": notices}

@router.post("", response_model=schemas.ScheduleSessionResponse, status_code=status.HTTP_201_CREATED)
async def schedule_session(
    draft: schemas.ScheduleSessionRequest,
    background_tasks: BackgroundTasks,
    current_user: CurrentUser = Depends(get_current_user),
    store: BaseSessionStore = Depends(get_session_store)
):
    """
    Schedule a new learning session.

    - **skill**, **counterpart**, **date** and **time** are required.
    - **duration** defaults to 60 minutes and **type** to a video call.
    """
    try:
        session, session_count, notices = await session_service.schedule_session(current_user.id, draft, store)
    except MissingFieldError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": GlobalMessages.MISSING_REQUIRED_FIELDS, "missing_fields": e.fields}
        )

    background_tasks.add_task(
        dispatcher.dispatch,
        "session_scheduled",
        user_id=current_user.id,
        session_count=session_count,
        notices=[notice.as_dict() for notice in notices],
    )
    return {"session": session, "notices": notices}

@router.delete("/{session_id}")
async def cancel_session(
    session_id: str,
    background_tasks: BackgroundTasks,
    current_user: CurrentUser = Depends(get_current_user),
    store: BaseSessionStore = Depends(get_session_store)
):
    """
    Cancel a session. Unknown ids are accepted and leave the collection unchanged.
    """
    notices = [notice.as_dict() for notice in await session_service.cancel_session(current_user.id, session_id, store)]
    background_tasks.add_task(dispatcher.dispatch, "session_cancelled", user_id=current_user.id, notices=notices)
    return resPayloadData(status.HTTP_200_OK, False, GlobalMessages.SESSION_CANCELLED, notices=notices)

@router.get("/calendar", response_model=schemas.CalendarMonthResponse)
async def get_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    current_user: CurrentUser = Depends(get_current_user),
    store: BaseSessionStore = Depends(get_session_store)
):
    """
    Month grid for the calendar view: 35 to 42 cells, blank cells are null.
    """
    return await session_service.get_calendar(current_user.id, year, month, store)

@router.get("/calendar/navigate", response_model=schemas.MonthReferenceResponse)
async def navigate_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(1, ge=1, le=31),
    direction: NavigationDirection = Query(...),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Move the calendar's reference date one month back or forward.
    """
    try:
        reference = dt.date(year, month, day)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    try:
        shifted = advance_month(reference, direction)
    except ValueError as e:
        # Stepping outside the supported date range
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"year": shifted.year, "month": shifted.month, "day": shifted.day, "label": month_label(shifted)}

@router.get("/on/{day}", response_model=schemas.SessionListResponse)
async def sessions_on_day(
    day: dt.date,
    current_user: CurrentUser = Depends(get_current_user),
    store: BaseSessionStore = Depends(get_session_store)
):
    """
    Retrieve the sessions scheduled on one calendar day.
    """
    sessions, notices = await session_service.get_sessions_on_date(current_user.id, day, store)
    return {"sessions": sessions, "notices": notices}

@router.get("/time-slots", response_model=List[str])
async def get_time_slots():
    return time_slots()
