# skillswap/modules/teachers/schemas.py

from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field

class TeacherResponse(BaseModel):
    id: UUID
    name: str
    avatar_url: Optional[str] = None
    skills: List[str]
    rating: float
    review_count: int
    hourly_rate: int
    location: str
    availability: str
    bio: str
    experience: str
    response_time: str

    class Config:
        from_attributes = True

class BecomeTeacherRequest(BaseModel):
    # Comma separated, e.g. "React, TypeScript"
    skills: str = ""
    hourly_rate: Optional[int] = Field(None, gt=0)
    location: str = ""
    bio: str = ""
    experience: str = ""

class BecomeTeacherResponse(BaseModel):
    message: str
    teacher: TeacherResponse
