# =======================================================================================
# gym_admin/services/summary_reconciler.py - Live Operational Summary
# =======================================================================================
import asyncio
import logging
from typing import Optional

from ..models.schemas import LiveAccessEvent, OperationalSummary

logger = logging.getLogger(__name__)


class SummaryReconciler:
    """
    Single owner of the cached Operational Summary.

    Two kinds of update exist:
    - replace(snapshot): authoritative reset from a full backend fetch.
    - apply_event(event): live adjustment. Only ENTRY events count, and only
      once a snapshot is loaded; they bump entriesToday by one.

    Events are not deduplicated. A redelivered ENTRY is counted twice until
    the next snapshot replaces the figures.
    """

    def __init__(self):
        self._summary: Optional[OperationalSummary] = None
        self.applied_since_snapshot = 0

    @property
    def current(self) -> Optional[OperationalSummary]:
        return self._summary

    @property
    def has_snapshot(self) -> bool:
        return self._summary is not None

    def replace(self, snapshot: OperationalSummary) -> OperationalSummary:
        self._summary = snapshot.model_copy()
        self.applied_since_snapshot = 0
        return self._summary

    def apply_event(self, event: LiveAccessEvent) -> bool:
        """Apply one live event; returns True when the summary changed."""
        if self._summary is None:
            logger.debug(f"No snapshot yet, ignoring {event.type} event")
            return False

        if event.type != "ENTRY":
            return False

        self._summary = self._summary.model_copy(
            update={"entriesToday": (self._summary.entriesToday or 0) + 1}
        )
        self.applied_since_snapshot += 1
        return True

    async def drain(self, queue: "asyncio.Queue[LiveAccessEvent]") -> None:
        """Apply events from the queue in arrival order until cancelled."""
        while True:
            event = await queue.get()
            try:
                self.apply_event(event)
            finally:
                queue.task_done()
