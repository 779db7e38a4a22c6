import datetime as dt

import pytest
from sqlalchemy import select

from skillswap.common.exceptions import CollaboratorUnavailable, MissingFieldError
from skillswap.modules.sessions import session_service
from skillswap.models.models import SessionCollection
from skillswap.modules.sessions.booking import SessionBook, SessionDraft
from skillswap.modules.sessions.session_store import BaseSessionStore, DatabaseSessionStore, InMemorySessionStore


class UnreadableStore(BaseSessionStore):
    def __init__(self):
        self.writes = []

    async def get_sessions(self, user_id):
        raise CollaboratorUnavailable("store offline")

    async def put_sessions(self, user_id, sessions):
        self.writes.append(list(sessions))


class ReadOnlyStore(InMemorySessionStore):
    async def put_sessions(self, user_id, sessions):
        raise CollaboratorUnavailable("disk full")


def draft(**overrides):
    values = dict(skill="Python", counterpart="Michael Rodriguez", date=dt.date(2025, 6, 14), time="11:00")
    values.update(overrides)
    return SessionDraft(**values)


async def test_in_memory_store_round_trip():
    store = InMemorySessionStore()
    session, count, _ = await session_service.schedule_session("u1", draft(), store)

    stored = await store.get_sessions("u1")
    assert stored == [session]
    assert count == 1
    assert await store.get_sessions("someone-else") == []


async def test_unreadable_documents_surface_as_unavailable():
    store = InMemorySessionStore()
    store._collections["u1"] = [{"id": "1", "skill": "React"}]
    with pytest.raises(CollaboratorUnavailable):
        await store.get_sessions("u1")


async def test_schedule_then_cancel_through_store():
    store = InMemorySessionStore()
    session, _, notices = await session_service.schedule_session("u1", draft(), store)
    assert [n.level for n in notices] == ["success"]

    notices = await session_service.cancel_session("u1", session.id, store)
    assert [n.message for n in notices] == ["Session cancelled successfully"]
    assert await store.get_sessions("u1") == []


async def test_missing_fields_do_not_write():
    store = InMemorySessionStore()
    with pytest.raises(MissingFieldError):
        await session_service.schedule_session("u1", draft(skill=""), store)
    assert await store.get_sessions("u1") == []


async def test_failed_load_degrades_to_empty_and_never_overwrites():
    store = UnreadableStore()

    sessions, notices = await session_service.get_sessions("u1", store)
    assert sessions == []
    assert [n.level for n in notices] == ["warning"]

    session, _, notices = await session_service.schedule_session("u1", draft(), store)
    assert session.skill == "Python"
    assert [n.level for n in notices] == ["warning", "success"]
    assert store.writes == []


async def test_write_failure_is_not_surfaced():
    store = ReadOnlyStore()
    session, count, notices = await session_service.schedule_session("u1", draft(), store)
    assert count == 1
    assert [n.level for n in notices] == ["success"]
    assert await store.get_sessions("u1") == []


async def test_list_and_calendar_share_one_collection():
    store = InMemorySessionStore()
    await session_service.schedule_session("u1", draft(date=dt.date(2025, 6, 20)), store)
    await session_service.schedule_session("u1", draft(date=dt.date(2025, 6, 3)), store)

    sessions, _ = await session_service.get_sessions("u1", store)
    calendar = await session_service.get_calendar("u1", 2025, 6, store, today=dt.date(2025, 6, 3))

    assert [s.date.day for s in sessions] == [3, 20]
    days_with_sessions = [c["date"].day for c in calendar["cells"] if c and c["sessions"]]
    assert days_with_sessions == [3, 20]
    assert calendar["label"] == "June 2025"
    assert [c["is_today"] for c in calendar["cells"] if c and c["date"].day == 3] == [True]


async def test_sessions_on_date():
    store = InMemorySessionStore()
    await session_service.schedule_session("u1", draft(date=dt.date(2025, 6, 20)), store)
    await session_service.schedule_session("u1", draft(date=dt.date(2025, 6, 21)), store)

    sessions, _ = await session_service.get_sessions_on_date("u1", dt.date(2025, 6, 21), store)
    assert [s.date for s in sessions] == [dt.date(2025, 6, 21)]


async def test_database_store_replaces_whole_collection(db, user):
    store = DatabaseSessionStore(db)
    assert await store.get_sessions(user.id) == []

    book = SessionBook(user.id)
    first = book.schedule_session(draft())
    second = book.schedule_session(draft(time="16:30"))
    await store.put_sessions(user.id, book.sessions)
    assert await store.get_sessions(user.id) == [first, second]

    book.cancel_session(first.id)
    await store.put_sessions(user.id, book.sessions)
    assert await store.get_sessions(user.id) == [second]

    rows = (await db.execute(select(SessionCollection))).scalars().all()
    assert len(rows) == 1
    assert rows[0].sessions[0]["date"] == "2025-06-14"


async def test_database_store_through_service(db, user):
    store = DatabaseSessionStore(db)
    session, count, _ = await session_service.schedule_session(user.id, draft(), store)

    sessions, notices = await session_service.get_sessions(user.id, store)

    assert count == 1
    assert sessions == [session]
    assert notices == []
