# =======================================================================================
# gym_admin/runtime.py - Composition root
# =======================================================================================
import logging
from typing import Callable, Optional

from .backend import BackendClient
from .services import (
    AccessService,
    AuthService,
    DashboardService,
    GymInfoService,
    MemberService,
    MembershipCatalogService,
    NotificationService,
    PaymentService,
    Session,
    SubscriptionService,
    SummaryReconciler,
)
from .utils.exceptions import NotAuthenticatedError
from .workers import EventStreamClient, LiveDashboardWorker

logger = logging.getLogger(__name__)


class AdminRuntime:
    """
    Builds every service once and owns the signed-in session together with
    its live dashboard worker. The worker starts on login and stops on logout
    or shutdown.
    """

    def __init__(
        self,
        backend: Optional[BackendClient] = None,
        stream_factory: Callable[[], EventStreamClient] = EventStreamClient,
        refresh_interval: Optional[float] = None,
        notification_duration: Optional[float] = None,
    ):
        self.backend = backend or BackendClient()
        self.auth_service = AuthService(self.backend)
        self.subscription_service = SubscriptionService(self.backend)
        self.payment_service = PaymentService(self.backend)
        self.access_service = AccessService(self.backend)
        self.member_service = MemberService(self.backend)
        self.catalog_service = MembershipCatalogService(self.backend)
        self.dashboard_service = DashboardService(self.backend)
        self.gym_info_service = GymInfoService(self.backend)

        self._stream_factory = stream_factory
        self._refresh_interval = refresh_interval
        self._notification_duration = notification_duration

        self.session: Optional[Session] = None
        self.worker: Optional[LiveDashboardWorker] = None

    async def login(self, email: str, password: str) -> Session:
        session = await self.auth_service.login(email, password)
        await self.logout()

        self.session = session
        self.worker = LiveDashboardWorker(
            session,
            self.dashboard_service,
            SummaryReconciler(),
            NotificationService(self._notification_duration),
            self._stream_factory(),
            refresh_interval=self._refresh_interval,
        )
        self.worker.start()
        return session

    async def logout(self) -> None:
        if self.worker is not None:
            await self.worker.stop()
        if self.session is not None:
            logger.info(f"Signed out {self.session.user.email}")
        self.worker = None
        self.session = None

    def require_session(self) -> Session:
        if self.session is None:
            raise NotAuthenticatedError("Sign in first")
        return self.session

    def require_worker(self) -> LiveDashboardWorker:
        self.require_session()
        return self.worker

    async def aclose(self) -> None:
        await self.logout()
        await self.backend.aclose()
