# skillswap/modules/sessions/calendar_view.py

import calendar
import datetime as dt
import enum
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from skillswap.modules.sessions.booking import Session

# Inline session summaries per day cell; the rest collapse into an overflow counter
MAX_VISIBLE_SESSIONS = 2
MIN_GRID_CELLS = 35


class NavigationDirection(str, enum.Enum):
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class CalendarCell:
    date: dt.date
    sessions: Tuple[Session, ...]
    is_today: bool = False

    @property
    def visible(self) -> Tuple[Session, ...]:
        return self.sessions[:MAX_VISIBLE_SESSIONS]

    @property
    def overflow(self) -> int:
        return max(len(self.sessions) - MAX_VISIBLE_SESSIONS, 0)


class SessionsOnDate:
    """
    Lazy view of the sessions falling on one calendar day.
    Every iteration filters the underlying collection again.
    """
    def __init__(self, sessions: Iterable[Session], day: dt.date):
        self._sessions = sessions
        self._day = day

    def __iter__(self) -> Iterator[Session]:
        return (s for s in self._sessions if s.date == self._day)

    def __len__(self) -> int:
        return sum(1 for _ in self)


def sessions_on_date(sessions: Iterable[Session], day: dt.date) -> SessionsOnDate:
    return SessionsOnDate(sessions, day)


def month_grid(
    reference: dt.date,
    sessions: Iterable[Session],
    today: Optional[dt.date] = None,
) -> List[Optional[CalendarCell]]:
    """
    Build the Sunday-first grid for the month containing `reference`.

    Blank cells (None) pad the days before the 1st and complete the last
    week, with at least five weeks shown, so the grid has 35 to 42 cells.
    """
    today = today or dt.date.today()
    year, month = reference.year, reference.month
    first = dt.date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]

    by_date: Dict[dt.date, List[Session]] = {}
    for session in sessions:
        if session.date.year == year and session.date.month == month:
            by_date.setdefault(session.date, []).append(session)

    # date.weekday() is Monday=0; shift so Sunday starts the week
    leading = (first.weekday() + 1) % 7
    cells: List[Optional[CalendarCell]] = [None] * leading
    for day in range(1, days_in_month + 1):
        current = dt.date(year, month, day)
        cells.append(CalendarCell(
            date=current,
            sessions=tuple(by_date.get(current, ())),
            is_today=current == today,
        ))

    while len(cells) % 7 or len(cells) < MIN_GRID_CELLS:
        cells.append(None)
    return cells


def advance_month(reference: dt.date, direction: NavigationDirection | str) -> dt.date:
    """
    Shift `reference` by one calendar month, keeping the day of month.
    Days past the end of the target month roll over into the next one
    (Jan 31 -> Mar 3, or Mar 2 in a leap year).
    """
    direction = NavigationDirection(direction)
    step = 1 if direction is NavigationDirection.NEXT else -1
    month_index = reference.year * 12 + (reference.month - 1) + step
    year, month = divmod(month_index, 12)
    return dt.date(year, month + 1, 1) + dt.timedelta(days=reference.day - 1)


def month_label(reference: dt.date) -> str:
    return f"{calendar.month_name[reference.month]} {reference.year}"


def time_slots(start_hour: int = 9, end_hour: int = 21, step_minutes: int = 30) -> List[str]:
    """Time picker choices for the booking dialog, e.g. 09:00 ... 21:30."""
    return [
        f"{hour:02d}:{minute:02d}"
        for hour in range(start_hour, end_hour + 1)
        for minute in range(0, 60, step_minutes)
    ]
