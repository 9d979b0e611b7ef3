# =======================================================================================
# gym_admin/services/notification_service.py - Live access notifications
# =======================================================================================
import asyncio
import logging
from typing import Optional

from ..config import config
from ..models.schemas import LiveAccessEvent

logger = logging.getLogger(__name__)

DEFAULT_MEMBER_NAME = "Member"


class NotificationService:
    """
    Turns live access events into a single transient notification.

    Only one message is visible. A newer event replaces the text and restarts
    the dismiss timer; nothing is queued.
    """

    def __init__(self, duration: Optional[float] = None):
        self.duration = duration if duration is not None else config.NOTIFICATION_DURATION
        self._message: Optional[str] = None
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None

    @staticmethod
    def format_message(event: LiveAccessEvent) -> str:
        name = (event.userName or "").strip() or DEFAULT_MEMBER_NAME
        return f"{name} registered a {event.type} event."

    @property
    def current(self) -> Optional[str]:
        return self._message

    def show(self, event: LiveAccessEvent) -> str:
        """Display the event's message; must run on the event loop."""
        message = self.format_message(event)
        self._message = message
        logger.info(f"Notification: {message}")

        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
        loop = asyncio.get_running_loop()
        self._dismiss_handle = loop.call_later(self.duration, self._dismiss)
        return message

    def _dismiss(self) -> None:
        self._message = None
        self._dismiss_handle = None

    def clear(self) -> None:
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
        self._dismiss()

    async def drain(self, queue: "asyncio.Queue[LiveAccessEvent]") -> None:
        while True:
            event = await queue.get()
            try:
                self.show(event)
            finally:
                queue.task_done()
