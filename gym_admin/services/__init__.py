# =======================================================================================
# gym_admin/services/__init__.py - Services Package
# =======================================================================================
from .auth_service import AuthService, Session
from .subscription_service import SubscriptionService
from .payment_service import PaymentService
from .access_service import AccessService
from .member_service import MemberService, MembershipCatalogService
from .dashboard_service import DashboardService
from .summary_reconciler import SummaryReconciler
from .notification_service import NotificationService
from .stomp_codec import StompCodec
from .gym_info_service import GymInfoService

__all__ = [
    "AuthService", "Session", "SubscriptionService", "PaymentService", "AccessService",
    "MemberService", "MembershipCatalogService", "DashboardService", "SummaryReconciler",
    "NotificationService", "StompCodec", "GymInfoService",
]
