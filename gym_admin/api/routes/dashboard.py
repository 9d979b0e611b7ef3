# =======================================================================================
# gym_admin/api/routes/dashboard.py
# =======================================================================================

from fastapi import APIRouter, Depends, HTTPException, status

from ...models.enums import StreamState
from ...models.schemas import NotificationResponse, OperationalSummary, StreamStatusResponse
from ...workers.dashboard_worker import LiveDashboardWorker
from ..dependencies import get_dashboard_worker

router = APIRouter()


@router.get("/dashboard/summary", response_model=OperationalSummary)
def get_summary(worker: LiveDashboardWorker = Depends(get_dashboard_worker)):
    """Reconciled summary: last snapshot plus live entries since then."""
    summary = worker.reconciler.current
    if summary is None:
        detail = worker.last_refresh_error or "Summary not loaded yet"
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return summary


@router.post("/dashboard/refresh", response_model=OperationalSummary)
async def refresh_summary(worker: LiveDashboardWorker = Depends(get_dashboard_worker)):
    """Manual refresh (retry affordance). Backend failures come back as 502."""
    return await worker.refresh()


@router.get("/dashboard/notification", response_model=NotificationResponse)
def get_notification(worker: LiveDashboardWorker = Depends(get_dashboard_worker)):
    return NotificationResponse(message=worker.notifier.current)


@router.get("/dashboard/stream", response_model=StreamStatusResponse)
def get_stream_status(worker: LiveDashboardWorker = Depends(get_dashboard_worker)):
    stream = worker.stream
    return StreamStatusResponse(
        state=stream.state.value,
        topic=stream.topic,
        connected=stream.state is StreamState.CONNECTED,
        connectAttempts=stream.connect_attempts,
        deliveredEvents=stream.delivered_events,
        droppedMessages=stream.dropped_messages,
    )
