# skillswap/modules/achievements/schemas.py

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel

class AchievementResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    type: str
    created_at: datetime

    class Config:
        from_attributes = True

class UserAchievementResponse(BaseModel):
    achievement: AchievementResponse
    earned_at: datetime

    class Config:
        from_attributes = True

class LevelResponse(BaseModel):
    total_points: int
    level: int
    current_level_points: int
    next_level_points: int
    progress_to_next_level: float

    class Config:
        from_attributes = True

class AchievementCardResponse(BaseModel):
    id: str
    name: str
    description: str
    type: str
    icon: str
    rarity: str
    points: int
    earned: bool
    earned_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class AchievementBoardResponse(BaseModel):
    achievements: List[AchievementCardResponse]
    progression: LevelResponse
