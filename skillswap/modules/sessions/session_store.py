"""
Per-user session collections behind a whole-collection replace contract.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence
from uuid import UUID

from pydantic import ValidationError as SchemaError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.common.exceptions import CollaboratorUnavailable
from skillswap.models.models import SessionCollection
from skillswap.modules.sessions.booking import Session

logger = logging.getLogger(__name__)


def _dump(sessions: Sequence[Session]) -> List[dict]:
    return [session.model_dump(mode="json") for session in sessions]


def _load(documents: List[dict]) -> List[Session]:
    try:
        return [Session.model_validate(doc) for doc in documents or []]
    except SchemaError as e:
        raise CollaboratorUnavailable(f"Stored sessions are unreadable: {e}") from e


class BaseSessionStore(ABC):
    """Abstract per-user session collection."""

    @abstractmethod
    async def get_sessions(self, user_id: str) -> List[Session]:
        """
        Return the user's stored sessions, or an empty list if none were saved.

        Raises:
            CollaboratorUnavailable: the backing store could not be read.
        """
        pass

    @abstractmethod
    async def put_sessions(self, user_id: str, sessions: Sequence[Session]) -> None:
        """
        Replace the user's whole collection with `sessions`.

        Raises:
            CollaboratorUnavailable: the backing store could not be written.
        """
        pass


class InMemorySessionStore(BaseSessionStore):
    """Process-local store; documents are kept serialized like the database blob."""

    def __init__(self):
        self._collections: Dict[str, List[dict]] = {}

    async def get_sessions(self, user_id: str) -> List[Session]:
        return _load(self._collections.get(str(user_id), []))

    async def put_sessions(self, user_id: str, sessions: Sequence[Session]) -> None:
        self._collections[str(user_id)] = _dump(sessions)


class DatabaseSessionStore(BaseSessionStore):
    """One `session_collections` row per user holding the JSON array."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_sessions(self, user_id: str) -> List[Session]:
        try:
            row = await self.db.get(SessionCollection, UUID(str(user_id)))
        except SQLAlchemyError as e:
            raise CollaboratorUnavailable(f"Could not read sessions: {e}") from e
        return _load(row.sessions) if row else []

    async def put_sessions(self, user_id: str, sessions: Sequence[Session]) -> None:
        try:
            row = await self.db.get(SessionCollection, UUID(str(user_id)))
            if row is None:
                row = SessionCollection(user_id=UUID(str(user_id)))
                self.db.add(row)
            row.sessions = _dump(sessions)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise CollaboratorUnavailable(f"Could not write sessions: {e}") from e
        logger.debug(f"Stored {len(sessions)} session(s) for user {user_id}")
