# skillswap/seed/seed.py
"""
Create the tables and load the achievement catalog and sample teacher listings.

    python -m skillswap.seed.seed

Rows that already exist (matched by name) are left untouched.
"""
import asyncio
import logging

from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.common.database.database import async_session, engine
from skillswap.models.models import Achievement, Base, TeacherListing

logger = logging.getLogger(__name__)

ACHIEVEMENTS = [
    {"name": "First Session", "description": "Schedule your first learning session", "type": "sessions", "icon": "book-open", "threshold_value": 1},
    {"name": "Regular Learner", "description": "Schedule 5 learning sessions", "type": "sessions", "icon": "book-open", "threshold_value": 5},
    {"name": "Dedicated Student", "description": "Schedule 20 learning sessions", "type": "sessions", "icon": "book-open", "threshold_value": 20},
    {"name": "Knowledge Sharer", "description": "Add your first skill to teach", "type": "skills", "icon": "star", "threshold_value": 1},
    {"name": "Skill Collector", "description": "Offer 5 different skills to teach", "type": "skills", "icon": "star", "threshold_value": 5},
    {"name": "Connector", "description": "Connect with 3 learning partners", "type": "connections", "icon": "users", "threshold_value": 3},
    {"name": "Top Rated", "description": "Receive a 5-star rating", "type": "ratings", "icon": "crown", "threshold_value": 5},
]

SAMPLE_TEACHERS = [
    {
        "name": "Sarah Chen",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=sarah",
        "skills": ["React", "JavaScript", "TypeScript"],
        "rating": 4.9,
        "review_count": 127,
        "hourly_rate": 45,
        "location": "San Francisco, CA",
        "availability": "Available now",
        "bio": "Full-stack developer with 8 years of experience. Passionate about teaching modern web development.",
        "experience": "8 years",
        "response_time": "< 1 hour",
    },
    {
        "name": "Michael Rodriguez",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=michael",
        "skills": ["Python", "Machine Learning", "Data Science"],
        "rating": 4.8,
        "review_count": 89,
        "hourly_rate": 60,
        "location": "New York, NY",
        "availability": "Available weekends",
        "bio": "Data scientist and ML engineer. Love helping others break into the field of AI and data science.",
        "experience": "6 years",
        "response_time": "< 2 hours",
    },
    {
        "name": "Emily Johnson",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=emily",
        "skills": ["UI/UX Design", "Figma", "Adobe Creative Suite"],
        "rating": 4.7,
        "review_count": 156,
        "hourly_rate": 40,
        "location": "Austin, TX",
        "availability": "Available evenings",
        "bio": "Senior UX designer with a passion for creating intuitive and beautiful user experiences.",
        "experience": "10 years",
        "response_time": "< 30 minutes",
    },
]

async def _seed_rows(db: AsyncSession, model, rows) -> int:
    res = await db.execute(select(model.name))
    existing = set(res.scalars().all())
    added = 0
    for row in rows:
        if row["name"] in existing:
            continue
        db.add(model(**row))
        added += 1
    return added

async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        achievements = await _seed_rows(db, Achievement, ACHIEVEMENTS)
        teachers = await _seed_rows(db, TeacherListing, SAMPLE_TEACHERS)
        await db.commit()
    logger.info(f"Seeded {achievements} achievement(s) and {teachers} teacher listing(s)")
    await engine.dispose()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    asyncio.run(seed())
