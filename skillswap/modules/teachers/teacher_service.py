# skillswap/modules/teachers/teacher_service.py

import logging
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.auth.dependencies import CurrentUser
from skillswap.common.exceptions import MissingFieldError
from skillswap.models.models import TeacherListing

logger = logging.getLogger(__name__)

AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"

def parse_skills(raw: str) -> List[str]:
    """Split a comma separated skill list, dropping empty entries."""
    return [skill.strip() for skill in (raw or "").split(",") if skill.strip()]

def filter_teachers(
    teachers: Iterable[TeacherListing],
    search: Optional[str] = None,
    skill: Optional[str] = None,
) -> List[TeacherListing]:
    """
    `search` matches name, any skill or bio; `skill` matches any skill.
    Both are case-insensitive substring matches and combine with AND.
    """
    filtered = list(teachers)

    if search:
        term = search.lower()
        filtered = [
            t for t in filtered
            if term in t.name.lower()
            or any(term in s.lower() for s in t.skills)
            or term in (t.bio or "").lower()
        ]

    if skill:
        term = skill.lower()
        filtered = [t for t in filtered if any(term in s.lower() for s in t.skills)]

    return filtered

def all_skills(teachers: Iterable[TeacherListing]) -> List[str]:
    return sorted({s for t in teachers for s in t.skills})

async def get_teachers(db: AsyncSession) -> Sequence[TeacherListing]:
    try:
        res = await db.execute(select(TeacherListing).order_by(TeacherListing.created_at.asc()))
        return res.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error loading teacher listings: {e}")
        return []

async def list_teachers(db: AsyncSession, search: Optional[str] = None, skill: Optional[str] = None) -> List[TeacherListing]:
    return filter_teachers(await get_teachers(db), search=search, skill=skill)

async def create_teacher_listing(current_user: CurrentUser, data: dict, db: AsyncSession) -> TeacherListing:
    """
    Publish the current user as a teacher.

    Raises:
        MissingFieldError: skills, hourly_rate or bio missing.
    """
    skills = parse_skills(data.get("skills", ""))
    missing = []
    if not skills:
        missing.append("skills")
    if not data.get("hourly_rate"):
        missing.append("hourly_rate")
    if not (data.get("bio") or "").strip():
        missing.append("bio")
    if missing:
        raise MissingFieldError(missing)

    name = current_user.name or "Anonymous Teacher"
    listing = TeacherListing(
        user_id=UUID(current_user.id),
        name=name,
        avatar_url=AVATAR_URL.format(seed=current_user.name or "teacher"),
        skills=skills,
        rating=5.0,
        review_count=0,
        hourly_rate=data["hourly_rate"],
        location=(data.get("location") or "").strip() or "Remote",
        availability="Available now",
        bio=data["bio"].strip(),
        experience=(data.get("experience") or "").strip() or "New teacher",
        response_time="< 1 hour",
    )
    db.add(listing)
    await db.commit()
    await db.refresh(listing)
    logger.info(f"Teacher listing {listing.id} created for user {current_user.id}")
    return listing
