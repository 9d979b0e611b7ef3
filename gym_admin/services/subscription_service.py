# =======================================================================================
# gym_admin/services/subscription_service.py - Membership Subscription Lifecycle
# =======================================================================================
import logging
from typing import Optional

from ..backend import BackendClient, parse_response
from ..models.schemas import AssignSubscriptionRequest, Subscription
from ..utils.exceptions import RequestError
from ..utils.validators import InputValidator

logger = logging.getLogger(__name__)

ACTIVE_LABEL = "Active ✔"


class SubscriptionService:
    """
    Reads and assigns a member's current subscription.

    Lifecycle state is whatever the backend says it is: no end-date math
    happens here, and the previous subscription is retired server-side when a
    new plan is assigned.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def get_current(self, member_id: int) -> Optional[Subscription]:
        """Current subscription, or None when the member has none."""
        try:
            data = await self.backend.get(f"/subscriptions/user/{member_id}/current")
        except RequestError as e:
            if e.is_not_found:
                logger.info(f"No active subscription for member {member_id}")
                return None
            raise

        if not data:
            return None
        return parse_response(Subscription, data)

    async def assign(self, member_id: int, plan_id: Optional[int], auto_renew: bool = False) -> Subscription:
        """Create a new subscription; the returned one becomes the member's current one."""
        plan_id = InputValidator.validate_plan_selection(plan_id)
        request = AssignSubscriptionRequest(userId=member_id, membershipId=plan_id, autoRenew=auto_renew)
        data = await self.backend.post("/subscriptions", json=request.model_dump())
        subscription = parse_response(Subscription, data)
        logger.info(
            f"Assigned plan {plan_id} to member {member_id}: "
            f"subscription {subscription.id} is {subscription.status}"
        )
        return subscription

    @staticmethod
    def status_label(subscription: Optional[Subscription]) -> Optional[str]:
        if subscription is None:
            return None
        if subscription.status == "ACTIVE":
            return ACTIVE_LABEL
        return subscription.status
