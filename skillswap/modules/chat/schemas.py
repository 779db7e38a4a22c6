# skillswap/modules/chat/schemas.py

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)

    @field_validator("message")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message cannot be blank")
        return v.strip()

class ChatResponse(BaseModel):
    reply: str
    timestamp: datetime
    source: str

    class Config:
        from_attributes = True
