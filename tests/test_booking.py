import datetime as dt

import pytest
from pydantic import ValidationError

from skillswap.common.exceptions import MissingFieldError
from skillswap.modules.sessions.booking import (
    DEFAULT_AVATAR,
    DialogClosedError,
    DialogState,
    SessionBook,
    SessionDraft,
    SessionType,
)


class FixedClock:
    def __call__(self):
        return dt.datetime(2025, 6, 1, 12, 0, tzinfo=dt.timezone.utc)


def full_draft(**overrides):
    values = dict(skill="React", counterpart="Sarah Chen", date=dt.date(2025, 6, 10), time="14:00")
    values.update(overrides)
    return SessionDraft(**values)


def test_schedule_appends_pending_session_with_defaults():
    book = SessionBook("user-1", clock=FixedClock())

    session = book.schedule_session(full_draft())

    assert book.sessions == (session,)
    assert session.status == "pending"
    assert session.duration == 60
    assert session.type is SessionType.VIDEO
    assert session.avatar == DEFAULT_AVATAR
    assert book.dialog_state is DialogState.CLOSED
    assert book.draft == SessionDraft()
    notices = book.drain_notices()
    assert [n.level for n in notices] == ["success"]
    assert notices[0].message == "Session scheduled successfully!"


def test_missing_fields_keep_dialog_open_with_draft():
    book = SessionBook("user-1")
    draft = full_draft(counterpart="", time="")

    with pytest.raises(MissingFieldError) as exc:
        book.schedule_session(draft)

    assert exc.value.fields == ["counterpart", "time"]
    assert book.sessions == ()
    assert book.dialog_state is DialogState.OPEN
    assert book.draft == draft
    assert [n.level for n in book.drain_notices()] == ["warning"]


def test_whitespace_only_counts_as_missing():
    book = SessionBook("user-1")
    with pytest.raises(MissingFieldError) as exc:
        book.schedule_session(full_draft(skill="   "))
    assert exc.value.fields == ["skill"]


def test_invalid_time_rejected_by_draft():
    with pytest.raises(ValidationError):
        SessionDraft(time="25:00")


def test_ids_unique_under_fixed_clock():
    book = SessionBook("user-1", clock=FixedClock())
    first = book.schedule_session(full_draft())
    second = book.schedule_session(full_draft(time="15:00"))
    assert first.id != second.id
    assert int(second.id) == int(first.id) + 1


def test_cancel_removes_session():
    book = SessionBook("user-1", clock=FixedClock())
    session = book.schedule_session(full_draft())
    book.drain_notices()

    assert book.cancel_session(session.id) is True
    assert book.sessions == ()
    assert [n.message for n in book.drain_notices()] == ["Session cancelled successfully"]


def test_cancel_unknown_id_is_noop_but_reports_success():
    book = SessionBook("user-1", clock=FixedClock())
    session = book.schedule_session(full_draft())
    book.drain_notices()

    assert book.cancel_session("does-not-exist") is False
    assert book.sessions == (session,)
    assert [n.level for n in book.drain_notices()] == ["success"]


def test_list_sessions_is_chronological():
    book = SessionBook("user-1", clock=FixedClock())
    late = book.schedule_session(full_draft(date=dt.date(2025, 6, 12), time="09:00"))
    early = book.schedule_session(full_draft(date=dt.date(2025, 6, 10), time="18:00"))
    earlier = book.schedule_session(full_draft(date=dt.date(2025, 6, 10), time="08:30"))

    assert book.list_sessions() == [earlier, early, late]
    # insertion order is kept in the collection itself
    assert book.sessions == (late, early, earlier)


def test_dialog_prefill_and_edits():
    book = SessionBook("user-1", clock=FixedClock())
    book.open_dialog(date=dt.date(2025, 6, 20))
    book.update_draft(skill="Figma", counterpart="Emily Johnson", time="10:30", type="in-person")

    session = book.schedule_session()

    assert session.date == dt.date(2025, 6, 20)
    assert session.type is SessionType.IN_PERSON


def test_editing_closed_dialog_raises():
    book = SessionBook("user-1")
    with pytest.raises(DialogClosedError):
        book.update_draft(skill="Python")


def test_dismiss_resets_draft():
    book = SessionBook("user-1")
    book.open_dialog(skill="Python")
    book.dismiss_dialog()
    assert book.dialog_state is DialogState.CLOSED
    assert book.draft.skill == ""


def test_empty_form_values_are_unset():
    draft = SessionDraft(skill="Guitar", counterpart="Alex", date="", time="14:00", duration="", type="")
    assert draft.date is None
    assert draft.duration is None
    assert draft.type is None
    assert draft.missing_fields() == ["date"]
