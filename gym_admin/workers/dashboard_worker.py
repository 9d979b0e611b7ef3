# =======================================================================================
# gym_admin/workers/dashboard_worker.py - Live dashboard background tasks
# =======================================================================================
import asyncio
import logging
from typing import List, Optional

from ..config import config
from ..models.schemas import LiveAccessEvent, OperationalSummary
from ..services.auth_service import Session
from ..services.dashboard_service import DashboardService
from ..services.notification_service import NotificationService
from ..services.summary_reconciler import SummaryReconciler
from ..utils.exceptions import RequestError
from .event_stream import EventStreamClient

logger = logging.getLogger(__name__)


class LiveDashboardWorker:
    """
    Wires the access stream to the reconciler and the notifier.

    Each decoded event is copied into two queues, one per consumer, and each
    queue is drained by its own task, so a slow notification never holds up
    the summary. Snapshots are fetched on start, every refresh interval, and
    on demand.
    """

    def __init__(
        self,
        session: Session,
        dashboard_service: DashboardService,
        reconciler: SummaryReconciler,
        notifier: NotificationService,
        stream: EventStreamClient,
        refresh_interval: Optional[float] = None,
    ):
        self.session = session
        self.dashboard_service = dashboard_service
        self.reconciler = reconciler
        self.notifier = notifier
        self.stream = stream
        self.refresh_interval = (
            refresh_interval if refresh_interval is not None else config.SUMMARY_REFRESH_INTERVAL
        )

        self.running = False
        self.last_refresh_error: Optional[str] = None
        self._summary_queue: Optional[asyncio.Queue] = None
        self._notification_queue: Optional[asyncio.Queue] = None
        self._tasks: List[asyncio.Task] = []

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self.running:
            return
        self.running = True

        self._summary_queue = asyncio.Queue()
        self._notification_queue = asyncio.Queue()
        self._tasks = [
            asyncio.create_task(self.reconciler.drain(self._summary_queue)),
            asyncio.create_task(self.notifier.drain(self._notification_queue)),
            asyncio.create_task(self._refresh_loop()),
        ]
        self.stream.connect(self.session.access_topic, self._fan_out)
        logger.info(f"[dashboard] Worker started for {self.session.user.email}")

    async def stop(self) -> None:
        if not self.running:
            return
        self.running = False

        await self.stream.disconnect()

        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self.notifier.clear()
        logger.info("[dashboard] Worker stopped")

    # ------------------------------------------------------------------
    # Event fan-out
    # ------------------------------------------------------------------
    def _fan_out(self, event: LiveAccessEvent) -> None:
        self._summary_queue.put_nowait(event)
        self._notification_queue.put_nowait(event)

    def _discard_pending_events(self) -> int:
        """Drop queued events that arrived before the snapshot being applied."""
        discarded = 0
        while True:
            try:
                self._summary_queue.get_nowait()
            except asyncio.QueueEmpty:
                return discarded
            self._summary_queue.task_done()
            discarded += 1

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    async def refresh(self) -> OperationalSummary:
        """Fetch a snapshot and make it the baseline. Failures propagate."""
        try:
            snapshot = await self.dashboard_service.fetch_summary()
        except RequestError as e:
            self.last_refresh_error = str(e)
            raise

        if self._summary_queue is not None:
            discarded = self._discard_pending_events()
            if discarded:
                logger.debug(f"[dashboard] Snapshot supersedes {discarded} queued event(s)")

        self.last_refresh_error = None
        return self.reconciler.replace(snapshot)

    async def _refresh_loop(self) -> None:
        while True:
            try:
                await self.refresh()
            except RequestError as e:
                logger.warning(f"[dashboard] Summary refresh failed: {e}")

            if self.refresh_interval <= 0:
                return
            await asyncio.sleep(self.refresh_interval)
