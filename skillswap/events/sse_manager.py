import asyncio
import json
import logging
from typing import Dict, Set

logger = logging.getLogger(__name__)

class NoticeStream:
    """
    Fans transient user notices (the client's toasts) out to every open
    server-sent-events connection of a user, one queue per browser tab.
    """
    def __init__(self):
        self.connections: Dict[str, Set[asyncio.Queue]] = {}

    def connect(self, user_id: str) -> asyncio.Queue:
        queue = asyncio.Queue()
        self.connections.setdefault(user_id, set()).add(queue)
        logger.debug(f"Notice stream opened for user_id: {user_id}. Open streams: {len(self.connections[user_id])}")
        return queue

    def disconnect(self, user_id: str, queue: asyncio.Queue):
        if user_id in self.connections and queue in self.connections[user_id]:
            self.connections[user_id].remove(queue)
            logger.debug(f"Notice stream closed for user_id: {user_id}. Open streams: {len(self.connections[user_id])}")
            if not self.connections[user_id]:
                del self.connections[user_id]

    async def send_to_user(self, user_id: str, notice: dict) -> int:
        """
        Push a notice to all of the user's open streams.
        Returns how many streams received it; 0 when the user is not listening.
        """
        queues = self.connections.get(user_id)
        if not queues:
            return 0

        try:
            payload = json.dumps(notice, default=str)
        except TypeError as e:
            logger.error(f"Failed to serialize notice: {e}")
            return 0

        message = f"data: {payload}\n\n"
        for queue in queues:
            await queue.put(message)
        logger.debug(f"Sent notice to user_id: {user_id} across {len(queues)} stream(s)")
        return len(queues)

# Global instance
notice_stream = NoticeStream()
