# skillswap/modules/sessions/session_service.py

import datetime as dt
import logging
from typing import List, Optional, Tuple

from skillswap.common.exceptions import CollaboratorUnavailable
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.modules.sessions.booking import Notice, Session, SessionBook, SessionDraft
from skillswap.modules.sessions.calendar_view import (
    month_grid,
    month_label,
    sessions_on_date,
)
from skillswap.modules.sessions.session_store import BaseSessionStore

logger = logging.getLogger(__name__)

async def load_book(user_id: str, store: BaseSessionStore) -> SessionBook:
    """
    Load the user's sessions into a fresh booking state.
    An unreadable store yields an empty, read-only book plus a warning notice.
    """
    try:
        sessions = await store.get_sessions(user_id)
    except CollaboratorUnavailable as e:
        logger.error(f"Error loading sessions for {user_id}: {e}")
        book = SessionBook(user_id, degraded=True)
        book.notify("warning", GlobalMessages.SESSIONS_UNAVAILABLE)
        return book

    return SessionBook(user_id, sessions)

async def _persist(book: SessionBook, store: BaseSessionStore):
    """
    Write the whole collection back. Write failures are logged only; the
    caller sees the same outcome as a successful write.
    """
    if book.degraded:
        # Never overwrite a collection we could not read
        logger.warning(f"Skipping session write for {book.user_id}: collection was not loaded")
        return
    try:
        await store.put_sessions(book.user_id, book.sessions)
    except CollaboratorUnavailable as e:
        logger.error(f"Error saving sessions for {book.user_id}: {e}")

async def get_sessions(user_id: str, store: BaseSessionStore) -> Tuple[List[Session], List[Notice]]:
    book = await load_book(user_id, store)
    return book.list_sessions(), book.drain_notices()

async def schedule_session(
    user_id: str,
    draft: SessionDraft,
    store: BaseSessionStore,
) -> Tuple[Session, int, List[Notice]]:
    """
    Submit a booking draft for the user.

    Returns the new session, the size of the updated collection and the
    notices to show. MissingFieldError propagates to the caller untouched.
    """
    book = await load_book(user_id, store)
    book.open_dialog()
    session = book.schedule_session(draft)
    await _persist(book, store)
    logger.info(f"Session {session.id} ({session.skill} with {session.counterpart}) scheduled for user {user_id}")
    return session, len(book.sessions), book.drain_notices()

async def cancel_session(user_id: str, session_id: str, store: BaseSessionStore) -> List[Notice]:
    book = await load_book(user_id, store)
    removed = book.cancel_session(session_id)
    await _persist(book, store)
    if removed:
        logger.info(f"Session {session_id} cancelled for user {user_id}")
    else:
        logger.debug(f"Cancel for unknown session {session_id} of user {user_id} ignored")
    return book.drain_notices()

async def get_sessions_on_date(user_id: str, day: dt.date, store: BaseSessionStore) -> Tuple[List[Session], List[Notice]]:
    book = await load_book(user_id, store)
    return list(sessions_on_date(book.sessions, day)), book.drain_notices()

async def get_calendar(
    user_id: str,
    year: int,
    month: int,
    store: BaseSessionStore,
    today: Optional[dt.date] = None,
) -> dict:
    """
    Month grid for the calendar view, built over the same collection as the list view.
    """
    book = await load_book(user_id, store)
    reference = dt.date(year, month, 1)
    cells = month_grid(reference, book.sessions, today=today)
    return {
        "year": year,
        "month": month,
        "label": month_label(reference),
        "cells": [
            None if cell is None else {
                "date": cell.date,
                "is_today": cell.is_today,
                "sessions": list(cell.sessions),
                "visible": list(cell.visible),
                "overflow": cell.overflow,
            }
            for cell in cells
        ],
        "notices": book.drain_notices(),
    }
