import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from skillswap.events.dispatcher import dispatcher
from skillswap.models.models import UserAchievement, Achievement

logger = logging.getLogger(__name__)

async def _already_earned(user_id: UUID, achievement_id: UUID, db: AsyncSession) -> bool:
    result = await db.execute(
        select(UserAchievement.id).where(
            UserAchievement.user_id == user_id,
            UserAchievement.achievement_id == achievement_id
        )
    )
    return result.first() is not None

async def award_achievement(user_id: str, achievement_name: str, db: AsyncSession) -> bool:
    """
    Award a catalog achievement to the user at most once.
    Returns True only when a new earned record was written.
    """
    user_uuid = UUID(str(user_id))
    result = await db.execute(select(Achievement.id).where(Achievement.name == achievement_name))
    achievement_id = result.scalars().first()
    if achievement_id is None:
        logger.warning("Achievement '%s' not found", achievement_name)
        return False

    if await _already_earned(user_uuid, achievement_id, db):
        logger.debug("User %s already has achievement '%s'", user_id, achievement_name)
        return False

    db.add(UserAchievement(user_id=user_uuid, achievement_id=achievement_id))
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent award won the unique constraint
        await db.rollback()
        logger.debug("User %s raced to achievement '%s'", user_id, achievement_name)
        return False

    logger.info("Achievement '%s' awarded to user %s", achievement_name, user_id)
    await dispatcher.dispatch("achievement_unlocked", user_id=user_id, achievement_name=achievement_name, db=db)
    return True

async def award_threshold_achievements(user_id: str, achievement_type: str, value: int, db: AsyncSession) -> int:
    """
    Award every achievement of `achievement_type` whose threshold the user has reached.
    Returns the number of newly earned achievements.
    """
    result = await db.execute(
        select(Achievement.name).where(
            Achievement.type == achievement_type,
            Achievement.threshold_value <= value,
        ).order_by(Achievement.threshold_value.asc())
    )
    # Plain names: a rollback inside award_achievement expires loaded instances
    names = list(result.scalars().all())
    awarded = 0
    for name in names:
        if await award_achievement(user_id, name, db):
            awarded += 1
    return awarded
