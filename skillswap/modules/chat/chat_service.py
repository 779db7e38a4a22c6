# skillswap/modules/chat/chat_service.py

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from skillswap.auth.dependencies import CurrentUser
from skillswap.common.config import settings
from skillswap.common.exceptions import CollaboratorUnavailable
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.models.models import Profile, Skill, UserInterest, UserSkill
from skillswap.modules.chat.gemini_client import GeminiClient, MentorContext, build_mentor_prompt
from skillswap.modules.chat.mentor_replies import generate_local_reply

logger = logging.getLogger(__name__)

AVAILABLE_SKILLS_LIMIT = 50


@dataclass(frozen=True)
class ChatReply:
    reply: str
    timestamp: datetime
    # gemini | local | fallback
    source: str


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def load_mentor_context(user: CurrentUser, db: AsyncSession) -> MentorContext:
    """
    Gather profile and skill lists for the prompt. Lookup failures leave the
    matching part of the context empty.
    """
    context = MentorContext(display_name=user.name)
    user_uuid = UUID(str(user.id))
    try:
        profile = await db.get(Profile, user_uuid)
        if profile:
            context.display_name = profile.display_name or context.display_name
            context.bio = profile.bio

        teach = await db.execute(
            select(UserSkill).options(selectinload(UserSkill.skill)).where(UserSkill.user_id == user_uuid)
        )
        context.teach_skills = [row.skill.name for row in teach.scalars().all()]

        learn = await db.execute(
            select(UserInterest).options(selectinload(UserInterest.skill)).where(UserInterest.user_id == user_uuid)
        )
        context.learn_skills = [row.skill.name for row in learn.scalars().all()]

        skills = await db.execute(select(Skill.name).limit(AVAILABLE_SKILLS_LIMIT))
        context.available_skills = list(skills.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error loading mentor context for {user.id}: {e}")
    return context


async def send_chat_prompt(
    user: CurrentUser,
    message: str,
    db: AsyncSession,
    client: Optional[GeminiClient] = None,
) -> ChatReply:
    """
    Answer one mentor message.

    With no API key configured the local keyword replies are used after a
    short delay. A failed remote call yields the canned apology.
    """
    if client is None:
        if not settings.GEMINI_API_KEY:
            await asyncio.sleep(settings.CHAT_FALLBACK_DELAY_SECONDS)
            return ChatReply(generate_local_reply(message, user.name), _now(), "local")
        client = GeminiClient(settings.GEMINI_API_KEY)

    context = await load_mentor_context(user, db)
    try:
        reply = await client.generate(build_mentor_prompt(context, message))
    except CollaboratorUnavailable as e:
        logger.error(f"Error in mentor chat for {user.id}: {e}")
        return ChatReply(GlobalMessages.CHAT_UNAVAILABLE, _now(), "fallback")

    logger.info(f"Mentor reply generated for user {user.id}")
    return ChatReply(reply, _now(), "gemini")
