"""
Progression engine: turns a count of earned achievements into a level,
a point total and the progress toward the next level.

Every achievement is worth the same number of points. The catalog's
type tag only picks an icon and a display rarity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from skillswap.common.config import settings


@dataclass(frozen=True)
class ProgressionSummary:
    total_points: int
    level: int
    current_level_points: int
    next_level_points: int
    progress_to_next_level: float


@dataclass(frozen=True)
class AchievementCard:
    id: str
    name: str
    description: str
    type: str
    icon: str
    rarity: str
    points: int
    earned: bool
    earned_at: Optional[datetime] = None


ICONS_BY_TYPE = {
    "sessions": "book-open",
    "connections": "users",
    "skills": "star",
    "ratings": "crown",
}
DEFAULT_ICON = "trophy"


def compute_progression(
    earned_count: int,
    points_per_achievement: Optional[int] = None,
    points_per_level: Optional[int] = None,
) -> ProgressionSummary:
    """
    Derive the progression summary for a user.

    Args:
        earned_count (int): Number of achievements the user has earned (>= 0).
        points_per_achievement (int, optional): Overrides POINTS_PER_ACHIEVEMENT.
        points_per_level (int, optional): Overrides POINTS_PER_LEVEL.

    Returns:
        ProgressionSummary: level starts at 1 and is unbounded; progress is a
        percentage in [0, 100) of the current level band.
    """
    if earned_count < 0:
        raise ValueError("earned_count must be non-negative")

    per_achievement = settings.POINTS_PER_ACHIEVEMENT if points_per_achievement is None else points_per_achievement
    per_level = settings.POINTS_PER_LEVEL if points_per_level is None else points_per_level
    if per_achievement < 0 or per_level <= 0:
        raise ValueError("points_per_achievement must be non-negative and points_per_level positive")

    total_points = earned_count * per_achievement
    level = total_points // per_level + 1
    current_level_points = (level - 1) * per_level
    next_level_points = level * per_level
    progress = (total_points - current_level_points) * 100 / per_level

    return ProgressionSummary(
        total_points=total_points,
        level=level,
        current_level_points=current_level_points,
        next_level_points=next_level_points,
        progress_to_next_level=progress,
    )


def icon_for_type(achievement_type: Optional[str]) -> str:
    return ICONS_BY_TYPE.get(achievement_type or "", DEFAULT_ICON)


def rarity_for_type(achievement_type: Optional[str]) -> str:
    return achievement_type or "common"


def build_achievement_board(catalog: Iterable, earned: Iterable) -> List[AchievementCard]:
    """
    Join the achievement catalog with the user's earned records.

    `catalog` items need `id`, `name`, `description` and `type`; `earned`
    items need `achievement_id` and `earned_at`. The first earned record
    for an achievement wins if duplicates slipped through.
    """
    earned_by_id = {}
    for record in earned:
        earned_by_id.setdefault(str(record.achievement_id), record)

    cards = []
    for entry in catalog:
        record = earned_by_id.get(str(entry.id))
        cards.append(AchievementCard(
            id=str(entry.id),
            name=entry.name,
            description=entry.description or "",
            type=entry.type,
            icon=icon_for_type(entry.type),
            rarity=rarity_for_type(entry.type),
            points=settings.POINTS_PER_ACHIEVEMENT,
            earned=record is not None,
            earned_at=record.earned_at if record is not None else None,
        ))
    return cards
