# skillswap/modules/achievements/achievement_controller.py

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from skillswap.modules.achievements import achievement_service, schemas
from skillswap.common.database.database import get_db_session
from skillswap.auth.dependencies import CurrentUser, get_current_user

router = APIRouter(tags=["achievements"])

@router.get("/achievements", response_model=schemas.AchievementBoardResponse)
async def get_achievement_board(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Retrieve the full achievement catalog, marking the ones the current user has earned.
    """
    return await achievement_service.get_achievement_board(current_user.id, db)

@router.get("/user/achievements", response_model=List[schemas.UserAchievementResponse])
async def get_user_achievements(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Retrieve all achievements earned by the currently authenticated user.
    """
    return await achievement_service.get_earned_achievements(current_user.id, db)

@router.get("/user/level", response_model=schemas.LevelResponse)
async def get_level_progress(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Returns the current user's level, point total and progress toward the next level.
    """
    return await achievement_service.get_progression(current_user.id, db)
