# =======================================================================================
# gym_admin/api/routes/memberships.py - Membership Plan Catalog Endpoints
# =======================================================================================
from typing import List
from fastapi import APIRouter, Depends
from ...models.schemas import CreatePlanRequest, MembershipPlan
from ...runtime import AdminRuntime
from ...services.auth_service import Session
from ..dependencies import get_runtime, get_session

router = APIRouter()


@router.get("/memberships", response_model=List[MembershipPlan])
async def list_plans(
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.catalog_service.list_plans()


@router.post("/memberships", response_model=MembershipPlan)
async def create_plan(
    request: CreatePlanRequest,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.catalog_service.create_plan(
        request.name, request.durationDays, request.price, request.description
    )
