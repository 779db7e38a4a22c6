# skillswap/modules/achievements/achievement_service.py

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.models.models import Achievement, UserAchievement
from skillswap.modules.achievements.progression import (
    ProgressionSummary,
    build_achievement_board,
    compute_progression,
)

logger = logging.getLogger(__name__)

async def get_achievement_catalog(db: AsyncSession) -> List[Achievement]:
    """
    Retrieve every achievement definition.
    Falls back to an empty catalog when the record store is unavailable.
    """
    try:
        res = await db.execute(select(Achievement).order_by(Achievement.created_at.asc()))
        return list(res.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error loading achievement catalog: {e}")
        return []

async def get_earned_achievements(user_id: str, db: AsyncSession) -> List[UserAchievement]:
    """
    Retrieve all achievements earned by the user, newest first.
    """
    stmt = select(UserAchievement).where(UserAchievement.user_id == UUID(str(user_id))).options(
        selectinload(UserAchievement.achievement)
    ).order_by(UserAchievement.earned_at.desc())
    try:
        res = await db.execute(stmt)
        return list(res.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error loading earned achievements for {user_id}: {e}")
        return []

async def get_progression(user_id: str, db: AsyncSession) -> ProgressionSummary:
    earned = await get_earned_achievements(user_id, db)
    return compute_progression(len(earned))

async def get_achievement_board(user_id: str, db: AsyncSession) -> dict:
    """
    Catalog joined with the user's earned records, plus the progression summary.
    """
    catalog = await get_achievement_catalog(db)
    earned = await get_earned_achievements(user_id, db)
    return {
        "achievements": build_achievement_board(catalog, earned),
        "progression": compute_progression(len(earned)),
    }
