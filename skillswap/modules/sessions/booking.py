"""
Booking state for one user's learning sessions.

`SessionBook` owns the in-memory session list and a single booking dialog
(closed -> open(draft) -> submitted | dismissed -> closed). It never touches
storage: callers load it from a session store, run one operation and write
`book.sessions` back as a whole.
"""
import datetime as dt
import enum
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from skillswap.common.config import settings
from skillswap.common.exceptions import MissingFieldError, SkillSwapError
from skillswap.common.utils.global_messages import GlobalMessages

DEFAULT_AVATAR = "/placeholder.svg"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
REQUIRED_FIELDS = ("skill", "counterpart", "date", "time")


class SessionType(str, enum.Enum):
    VIDEO = "video"
    IN_PERSON = "in-person"


class DialogState(str, enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


class Session(BaseModel):
    id: str
    skill: str
    counterpart: str
    date: dt.date
    time: str = Field(pattern=TIME_PATTERN)
    duration: int = Field(gt=0)
    type: SessionType = SessionType.VIDEO
    status: str = "pending"
    notes: str = ""
    avatar: str = DEFAULT_AVATAR


class SessionDraft(BaseModel):
    """In-progress values of the booking dialog. Empty strings mean 'not filled in'."""
    skill: str = ""
    counterpart: str = ""
    date: Optional[dt.date] = None
    time: str = Field(default="", pattern=r"^$|" + TIME_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    type: Optional[SessionType] = None
    notes: str = ""

    @field_validator("date", "duration", "type", mode="before")
    @classmethod
    def empty_as_unset(cls, v):
        # Untouched form inputs arrive as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def missing_fields(self) -> List[str]:
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


@dataclass(frozen=True)
class Notice:
    level: str  # success | warning | error | info
    message: str

    def as_dict(self) -> dict:
        return {"level": self.level, "message": self.message}


class DialogClosedError(SkillSwapError):
    """The draft was edited or submitted while the booking dialog was closed."""


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class SessionBook:
    def __init__(
        self,
        user_id: str,
        sessions: Iterable[Session] = (),
        clock: Callable[[], dt.datetime] = _utcnow,
        degraded: bool = False,
    ):
        self.user_id = user_id
        # True when the stored collection could not be read
        self.degraded = degraded
        self._sessions: List[Session] = list(sessions)
        self._clock = clock
        self._notices: List[Notice] = []
        self.dialog_state = DialogState.CLOSED
        self.draft = SessionDraft()

    @property
    def sessions(self) -> Tuple[Session, ...]:
        return tuple(self._sessions)

    def list_sessions(self) -> List[Session]:
        """Chronological view of the collection."""
        return sorted(self._sessions, key=lambda s: (s.date, s.time))

    def notify(self, level: str, message: str):
        self._notices.append(Notice(level, message))

    def drain_notices(self) -> List[Notice]:
        notices, self._notices = self._notices, []
        return notices

    # Dialog

    def open_dialog(self, **prefill):
        """
        Open the booking dialog. Prefilled values (e.g. a date picked on the
        calendar) are merged into the current draft.
        """
        if prefill:
            self.draft = SessionDraft.model_validate({**self.draft.model_dump(), **prefill})
        self.dialog_state = DialogState.OPEN

    def update_draft(self, **fields):
        if self.dialog_state is not DialogState.OPEN:
            raise DialogClosedError("Open the booking dialog before editing the draft.")
        self.draft = SessionDraft.model_validate({**self.draft.model_dump(), **fields})

    def dismiss_dialog(self):
        self.draft = SessionDraft()
        self.dialog_state = DialogState.CLOSED

    # Mutations

    def _next_id(self) -> str:
        candidate = int(self._clock().timestamp() * 1000)
        taken = {s.id for s in self._sessions}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def schedule_session(self, draft: Optional[SessionDraft] = None) -> Session:
        """
        Submit the draft (the given one, or the dialog's current one).

        Raises MissingFieldError when skill, counterpart, date or time is empty;
        the dialog then stays open with the draft exactly as entered.
        """
        if draft is not None:
            self.draft = draft
            self.dialog_state = DialogState.OPEN
        if self.dialog_state is not DialogState.OPEN:
            raise DialogClosedError("There is no open booking dialog to submit.")

        missing = self.draft.missing_fields()
        if missing:
            self.notify("warning", GlobalMessages.MISSING_REQUIRED_FIELDS)
            raise MissingFieldError(missing)

        session = Session(
            id=self._next_id(),
            skill=self.draft.skill.strip(),
            counterpart=self.draft.counterpart.strip(),
            date=self.draft.date,
            time=self.draft.time,
            duration=self.draft.duration or settings.DEFAULT_SESSION_DURATION,
            type=self.draft.type or SessionType.VIDEO,
            status="pending",
            notes=self.draft.notes,
        )
        self._sessions.append(session)
        self.dismiss_dialog()
        self.notify("success", GlobalMessages.SESSION_SCHEDULED)
        return session

    def cancel_session(self, session_id: str) -> bool:
        """
        Remove the session with this id. Unknown ids are a no-op and still
        report success to the user. Returns whether anything was removed.
        """
        remaining = [s for s in self._sessions if s.id != session_id]
        removed = len(remaining) != len(self._sessions)
        self._sessions = remaining
        self.notify("success", GlobalMessages.SESSION_CANCELLED)
        return removed
