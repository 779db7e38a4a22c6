# skillswap/modules/user/schemas.py

from enum import Enum
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

class SkillKind(str, Enum):
    TEACH = "teach"
    LEARN = "learn"

class ProfileResponse(BaseModel):
    user_id: UUID
    display_name: str | None = None
    bio: str | None = None
    location: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True

class UpdateProfileRequest(BaseModel):
    display_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    avatar_url: Optional[str] = Field(None, max_length=255)

class UserSkillsResponse(BaseModel):
    teach: List[str]
    learn: List[str]

class AddSkillRequest(BaseModel):
    kind: SkillKind
    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Skill name cannot be blank")
        return v.strip()
