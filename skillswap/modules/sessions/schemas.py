# skillswap/modules/sessions/schemas.py

import datetime as dt
from typing import List, Optional
from pydantic import BaseModel

from skillswap.modules.sessions.booking import Session, SessionDraft

class NoticeResponse(BaseModel):
    level: str
    message: str

    class Config:
        from_attributes = True

class ScheduleSessionRequest(SessionDraft):
    """Booking dialog values as submitted by the client."""
    pass

class SessionResponse(Session):
    class Config:
        from_attributes = True

class SessionListResponse(BaseModel):
    sessions: List[SessionResponse]
    notices: List[NoticeResponse] = []

class ScheduleSessionResponse(BaseModel):
    session: SessionResponse
    notices: List[NoticeResponse] = []

class CalendarCellResponse(BaseModel):
    date: dt.date
    is_today: bool
    sessions: List[SessionResponse]
    visible: List[SessionResponse]
    overflow: int

class CalendarMonthResponse(BaseModel):
    year: int
    month: int
    label: str
    cells: List[Optional[CalendarCellResponse]]
    notices: List[NoticeResponse] = []

class MonthReferenceResponse(BaseModel):
    year: int
    month: int
    day: int
    label: str
