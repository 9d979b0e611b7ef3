# =======================================================================================
# gym_admin/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *

__all__ = [
    "Member", "AuthUser", "MembershipPlan", "Subscription", "Payment",
    "AccessEvent", "LiveAccessEvent", "OperationalSummary", "StompFrame", "GymInfo",
    "SubscriptionStatus", "PaymentMethod", "AccessType", "StreamState", "StompCommand",
]
