# =======================================================================================
# gym_admin/api/routes/members.py - Member Detail Endpoints
# =======================================================================================
from typing import List
from fastapi import APIRouter, Depends
from ...models.schemas import (
    AccessEvent,
    AssignPlanBody,
    CreateMemberRequest,
    CurrentSubscriptionResponse,
    Member,
    Payment,
    RecordPaymentBody,
    RegisterAccessBody,
)
from ...runtime import AdminRuntime
from ...services.auth_service import Session
from ..dependencies import get_runtime, get_session

router = APIRouter()


def _subscription_view(runtime: AdminRuntime, subscription) -> CurrentSubscriptionResponse:
    return CurrentSubscriptionResponse(
        subscription=subscription,
        statusLabel=runtime.subscription_service.status_label(subscription),
        suggestedPaymentAmount=runtime.payment_service.suggested_amount(subscription),
    )


# ---- members ----

@router.get("/members", response_model=List[Member])
async def list_members(
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.member_service.list_members()


@router.post("/members", response_model=Member)
async def create_member(
    request: CreateMemberRequest,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.member_service.create_member(
        request.name, request.email, request.phone, request.password
    )


# ---- subscription ----

@router.get("/members/{member_id}/subscription", response_model=CurrentSubscriptionResponse)
async def get_current_subscription(
    member_id: int,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    subscription = await runtime.subscription_service.get_current(member_id)
    return _subscription_view(runtime, subscription)


@router.post("/members/{member_id}/subscription", response_model=CurrentSubscriptionResponse)
async def assign_plan(
    member_id: int,
    request: AssignPlanBody,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    subscription = await runtime.subscription_service.assign(
        member_id, request.membershipId, request.autoRenew
    )
    return _subscription_view(runtime, subscription)


# ---- payments ----

@router.get("/members/{member_id}/payments", response_model=List[Payment])
async def list_payments(
    member_id: int,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.payment_service.list_for_member(member_id)


@router.post("/members/{member_id}/payments", response_model=Payment)
async def record_payment(
    member_id: int,
    request: RecordPaymentBody,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.payment_service.record(
        member_id,
        request.amount,
        method=request.method,
        reference=request.reference,
        subscription_id=request.userMembershipId,
    )


# ---- access ----

@router.get("/members/{member_id}/access", response_model=List[AccessEvent])
async def list_access(
    member_id: int,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.access_service.list_for_member(member_id)


@router.post("/members/{member_id}/access", response_model=AccessEvent)
async def register_access(
    member_id: int,
    request: RegisterAccessBody,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.access_service.register(member_id, request.type, request.source)
