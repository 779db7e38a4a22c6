# skillswap/modules/chat/chat_controller.py

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.auth.dependencies import CurrentUser, get_current_user
from skillswap.common.config import settings
from skillswap.common.database.database import get_db_session
from skillswap.common.rate_limit import limiter
from skillswap.modules.chat import chat_service, schemas

router = APIRouter(prefix="/chat", tags=["chat"])

@router.post("", response_model=schemas.ChatResponse)
@limiter.limit(settings.CHAT_RATE_LIMIT)
async def send_message(
    request: Request,
    payload: schemas.ChatRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Ask the AI learning mentor a question.

    The reply's **source** is `gemini`, `local` when no model is configured,
    or `fallback` when the model could not be reached.
    """
    return await chat_service.send_chat_prompt(current_user, payload.message, db)
