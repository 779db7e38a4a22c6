# skillswap/modules/user/user_service.py

import logging
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.auth.dependencies import CurrentUser
from skillswap.common.exceptions import ValidationError
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.models.models import Profile, Skill, UserInterest, UserSkill

logger = logging.getLogger(__name__)

class DuplicateSkillError(ValidationError):
    """The skill is already on the user's list."""

def normalize_skill_name(name: str) -> str:
    return (name or "").strip()

def _link_model(kind: str):
    # teach -> UserSkill, learn -> UserInterest
    return UserSkill if kind == "teach" else UserInterest

async def get_profile(current_user: CurrentUser, db: AsyncSession) -> Profile:
    """
    Retrieve the user's profile. Users without a stored row get an unsaved
    profile carrying the name from their token.
    """
    profile = await db.get(Profile, UUID(current_user.id))
    if profile is None:
        profile = Profile(user_id=UUID(current_user.id), display_name=current_user.name)
    return profile

async def update_profile(current_user: CurrentUser, profile_data: dict, db: AsyncSession) -> Profile:
    """
    Update the user's profile with the provided (non-None) fields,
    creating the row on first write.
    """
    profile = await db.get(Profile, UUID(current_user.id))
    if profile is None:
        profile = Profile(user_id=UUID(current_user.id), display_name=current_user.name)
        db.add(profile)

    for key, value in profile_data.items():
        if value is not None:
            setattr(profile, key, value)
    await db.commit()
    await db.refresh(profile)
    logger.info(f"Profile updated for user {current_user.id}")
    return profile

async def get_skills(user_id: str, db: AsyncSession) -> Dict[str, List[str]]:
    lists = {}
    for kind in ("teach", "learn"):
        model = _link_model(kind)
        res = await db.execute(
            select(model).options(selectinload(model.skill))
            .where(model.user_id == UUID(user_id))
            .order_by(model.created_at.asc())
        )
        lists[kind] = [row.skill.name for row in res.scalars().all()]
    return lists

async def _get_or_create_skill(name: str, db: AsyncSession) -> Skill:
    res = await db.execute(select(Skill).where(Skill.name == name))
    skill = res.scalars().first()
    if skill is None:
        skill = Skill(name=name)
        db.add(skill)
        await db.flush()
    return skill

async def _already_listed(model, user_id: str, skill_id: UUID, db: AsyncSession) -> bool:
    res = await db.execute(
        select(model.id).where(model.user_id == UUID(user_id), model.skill_id == skill_id)
    )
    return res.first() is not None

async def add_skill(user_id: str, kind: str, name: str, db: AsyncSession) -> Dict[str, List[str]]:
    """
    Add a skill to the user's teach or learn list.

    Raises:
        ValidationError: blank name.
        DuplicateSkillError: the list already holds this skill.
    """
    name = normalize_skill_name(name)
    if not name:
        raise ValidationError("Skill name cannot be blank")

    model = _link_model(kind)
    skill = await _get_or_create_skill(name, db)
    if await _already_listed(model, user_id, skill.id, db):
        raise DuplicateSkillError(GlobalMessages.SKILL_ALREADY_EXISTS.format(kind=kind))

    db.add(model(user_id=UUID(user_id), skill_id=skill.id))
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent add won the unique constraint
        await db.rollback()
        raise DuplicateSkillError(GlobalMessages.SKILL_ALREADY_EXISTS.format(kind=kind))
    logger.info(f"Skill '{name}' added to {kind} list of user {user_id}")
    return await get_skills(user_id, db)

async def remove_skill(user_id: str, kind: str, name: str, db: AsyncSession) -> Optional[Dict[str, List[str]]]:
    """
    Remove a skill from one of the user's lists.
    Returns None when the skill was not on the list.
    """
    model = _link_model(kind)
    res = await db.execute(
        select(model).join(Skill, model.skill_id == Skill.id)
        .where(model.user_id == UUID(user_id), Skill.name == normalize_skill_name(name))
    )
    link = res.scalars().first()
    if link is None:
        return None

    await db.delete(link)
    await db.commit()
    logger.info(f"Skill '{name}' removed from {kind} list of user {user_id}")
    return await get_skills(user_id, db)
