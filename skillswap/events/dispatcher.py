import asyncio
import logging
from typing import Callable, Dict, List, Any
from skillswap.common.database.database import async_session

logger = logging.getLogger(__name__)

# Type alias for event handlers
EventHandler = Callable[..., Any]

class EventDispatcher:
    """
    A lightweight internal Pub/Sub system.
    Listeners subscribe to string-based events and receive the event kwargs plus `db`.
    When the caller passes its own `db`, listeners share it and the caller owns the
    transaction; otherwise the dispatcher opens a session and commits once all
    listeners have run.
    """
    def __init__(self, session_factory: Callable[[], Any] | None = None):
        self._listeners: Dict[str, List[EventHandler]] = {}
        self._session_factory = session_factory

    def subscribe(self, event_name: str, handler: EventHandler):
        self._listeners.setdefault(event_name, []).append(handler)
        logger.info(f"Subscribed {handler.__name__} to '{event_name}'")

    def listeners(self, event_name: str) -> List[EventHandler]:
        return list(self._listeners.get(event_name, []))

    async def _run_listeners(self, event_name: str, **kwargs):
        tasks = [handler(**kwargs) for handler in self._listeners[event_name]]
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for res in results:
            if isinstance(res, Exception):
                logger.error(f"Error in listener for '{event_name}': {res}", exc_info=res)

    async def dispatch(self, event_name: str, **kwargs):
        """
        Dispatches an event to all subscribed listeners concurrently.
        Listener failures are logged and never reach the caller.
        """
        if not self._listeners.get(event_name):
            logger.debug(f"Event '{event_name}' dispatched, but no listeners attached.")
            return

        logger.info(f"Dispatching event '{event_name}' to {len(self._listeners[event_name])} listeners.")

        if kwargs.get("db") is not None:
            await self._run_listeners(event_name, **kwargs)
            return

        session_factory = self._session_factory or async_session
        async with session_factory() as session:
            kwargs["db"] = session
            try:
                await self._run_listeners(event_name, **kwargs)
                await session.commit()
            except Exception as e:
                logger.error(f"Failed to complete event dispatch for '{event_name}': {e}")
                await session.rollback()

# Singleton instance
dispatcher = EventDispatcher()
