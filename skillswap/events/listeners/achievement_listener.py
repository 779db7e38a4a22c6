import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession
from skillswap.events.dispatcher import dispatcher
from skillswap.models.models import UserSkill
from skillswap.modules.achievements.achievement_tasks import award_threshold_achievements

logger = logging.getLogger(__name__)

async def check_session_achievements(user_id: str, session_count: int, db: AsyncSession, **kwargs):
    """
    Listens for 'session_scheduled'.
    Awards every 'sessions' achievement whose threshold the new collection size reaches.
    """
    try:
        await award_threshold_achievements(user_id, "sessions", session_count, db)
    except Exception as e:
        logger.error(f"Error checking session achievements for {user_id}: {e}")

async def check_skill_achievements(user_id: str, db: AsyncSession, **kwargs):
    """
    Listens for 'skill_added'.
    Counts the skills the user offers to teach and awards 'skills' achievements.
    """
    try:
        res = await db.execute(
            select(func.count(UserSkill.id)).where(UserSkill.user_id == UUID(str(user_id)))
        )
        total_skills = res.scalar() or 0
        await award_threshold_achievements(user_id, "skills", total_skills, db)
    except Exception as e:
        logger.error(f"Error checking skill achievements for {user_id}: {e}")

# Subscribe listeners
dispatcher.subscribe("session_scheduled", check_session_achievements)
dispatcher.subscribe("skill_added", check_skill_achievements)
