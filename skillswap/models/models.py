import uuid

from sqlalchemy import (
    JSON, Column, Float, ForeignKey, Integer, String, Text, DateTime,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base, relationship, backref, Mapped

Base = declarative_base()

class Profile(Base):
    __tablename__ = "profiles"

    # user_id is issued by the hosted auth provider
    user_id = Column(UUID(as_uuid=True), primary_key=True, nullable=False)
    display_name = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    avatar_url = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Profile(user_id={self.user_id}, display_name={self.display_name})>"

class Skill(Base):
    __tablename__ = "skills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    name = Column(String(255), unique=True, nullable=False, index=True)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Skill(id={self.id}, name={self.name})>"

class UserSkill(Base):
    """A skill the user can teach."""
    __tablename__ = "user_skills"

    __table_args__ = (
        UniqueConstraint('user_id', 'skill_id', name='unique_user_skill'),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    skill_id = Column(UUID(as_uuid=True), ForeignKey("skills.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    skill: Mapped[Skill] = relationship("Skill", backref=backref("user_skills", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<UserSkill(id={self.id}, user_id={self.user_id}, skill_id={self.skill_id})>"

class UserInterest(Base):
    """A skill the user wants to learn."""
    __tablename__ = "user_interests"

    __table_args__ = (
        UniqueConstraint('user_id', 'skill_id', name='unique_user_interest'),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    skill_id = Column(UUID(as_uuid=True), ForeignKey("skills.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    skill: Mapped[Skill] = relationship("Skill", backref=backref("user_interests", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<UserInterest(id={self.id}, user_id={self.user_id}, skill_id={self.skill_id})>"

class TeacherListing(Base):
    __tablename__ = "teacher_listings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    # Seeded listings have no owning account
    user_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    avatar_url = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=False, default=5.0)
    review_count = Column(Integer, nullable=False, default=0)
    hourly_rate = Column(Integer, nullable=False)
    location = Column(String(255), nullable=False, default="Remote")
    availability = Column(String(100), nullable=False, default="Available now")
    bio = Column(Text, nullable=False)
    experience = Column(String(100), nullable=False, default="New teacher")
    response_time = Column(String(50), nullable=False, default="< 1 hour")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<TeacherListing(id={self.id}, name={self.name})>"

class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(255), nullable=True)
    # sessions | connections | skills | ratings; drives icon and unlock evaluation
    type = Column(String(50), nullable=False, default="sessions")
    threshold_value = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Achievement(id={self.id}, name={self.name}, type={self.type})>"

class UserAchievement(Base):
    __tablename__ = "user_achievements"

    __table_args__ = (
        UniqueConstraint('user_id', 'achievement_id', name='unique_user_achievement'),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    achievement_id = Column(UUID(as_uuid=True), ForeignKey("achievements.id"), nullable=False, index=True)
    earned_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    achievement: Mapped[Achievement] = relationship("Achievement", backref=backref("user_achievements", cascade="all, delete-orphan"))

    def __repr__(self):
        return f"<UserAchievement(id={self.id}, user_id={self.user_id}, achievement_id={self.achievement_id}, earned_at={self.earned_at})>"

class SessionCollection(Base):
    """
    Per-user keyed blob of scheduled sessions.
    Every write replaces the whole collection.
    """
    __tablename__ = "session_collections"

    user_id = Column(UUID(as_uuid=True), primary_key=True, nullable=False)
    sessions = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SessionCollection(user_id={self.user_id}, count={len(self.sessions or [])})>"
