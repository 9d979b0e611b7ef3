# =======================================================================================
# gym_admin/services/payment_service.py - Payments
# =======================================================================================
from typing import List, Optional

from ..backend import BackendClient, parse_list, parse_response
from ..models.schemas import CreatePaymentRequest, Payment, Subscription
from ..utils.validators import InputValidator


class PaymentService:
    """Records and lists payments. Payments are append-only from this side."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def record(
        self,
        member_id: int,
        amount,
        method: str = "CASH",
        reference: Optional[str] = None,
        subscription_id: Optional[int] = None,
    ) -> Payment:
        request = CreatePaymentRequest(
            userId=member_id,
            userMembershipId=subscription_id,
            amount=InputValidator.validate_payment_amount(amount),
            method=InputValidator.validate_payment_method(method),
            reference=InputValidator.clean_reference(reference),
        )
        data = await self.backend.post("/payments", json=request.model_dump())
        return parse_response(Payment, data)

    async def list_for_member(self, member_id: int) -> List[Payment]:
        data = await self.backend.get(f"/payments/user/{member_id}")
        return parse_list(Payment, data)

    @staticmethod
    def suggested_amount(subscription: Optional[Subscription]) -> Optional[float]:
        """Pre-fill value for a new payment: the plan's current price."""
        if subscription is None:
            return None
        return subscription.membership.price
