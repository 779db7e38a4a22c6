# skillswap/modules/notifications/notification_controller.py

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from skillswap.auth.dependencies import CurrentUser, get_current_user
from skillswap.events.sse_manager import NoticeStream, notice_stream

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])

KEEPALIVE_SECONDS = 15.0

async def notice_events(request: Request, user_id: str, stream: NoticeStream = notice_stream):
    queue = stream.connect(user_id)
    try:
        while not await request.is_disconnected():
            try:
                yield await asyncio.wait_for(queue.get(), timeout=KEEPALIVE_SECONDS)
            except asyncio.TimeoutError:
                # SSE comment line keeps proxies from closing the connection
                yield ": keep-alive\n\n"
    finally:
        stream.disconnect(user_id, queue)

@router.get("/stream")
async def stream_notices(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user)
):
    """
    Server-sent events carrying the user's notices
    (booking confirmations, unlocked achievements).
    """
    logger.info(f"Notice stream requested by user {current_user.id}")
    return StreamingResponse(
        notice_events(request, current_user.id),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
