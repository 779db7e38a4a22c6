import logging
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.events.dispatcher import dispatcher
from skillswap.events.sse_manager import notice_stream

logger = logging.getLogger(__name__)

async def notify_achievement_unlocked(user_id: str, achievement_name: str, **kwargs):
    """
    Listens for 'achievement_unlocked'.
    Pushes a success notice to the user's open notice streams.
    """
    try:
        notice = {
            "level": "success",
            "title": "Achievement Unlocked!",
            "message": GlobalMessages.ACHIEVEMENT_UNLOCKED.format(name=achievement_name),
        }
        delivered = await notice_stream.send_to_user(str(user_id), notice)
        logger.info(f"Achievement notice '{achievement_name}' for user {user_id} delivered to {delivered} stream(s)")
    except Exception as e:
        logger.error(f"Error pushing notice for achievement {achievement_name}: {e}")

async def notify_session_event(user_id: str, notices: list, **kwargs):
    """
    Listens for 'session_scheduled' and 'session_cancelled'.
    Mirrors the booking notices to the user's other tabs.
    """
    for notice in notices:
        await notice_stream.send_to_user(str(user_id), notice)

# Subscription rules
dispatcher.subscribe("achievement_unlocked", notify_achievement_unlocked)
dispatcher.subscribe("session_scheduled", notify_session_event)
dispatcher.subscribe("session_cancelled", notify_session_event)
