# =======================================================================================
# gym_admin/api/routes/gym.py - Gym Profile Endpoints
# =======================================================================================
from typing import Optional
from fastapi import APIRouter, Depends
from ...models.schemas import GymInfo, GymInfoBody
from ...runtime import AdminRuntime
from ...services.auth_service import Session
from ..dependencies import get_runtime, get_session

router = APIRouter()


@router.get("/gym", response_model=Optional[GymInfo])
async def get_gym_info(
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    """Profile of the signed-in administrator's gym, or null before the first save."""
    return await runtime.gym_info_service.get(session.user.id)


@router.put("/gym", response_model=GymInfo)
async def save_gym_info(
    request: GymInfoBody,
    session: Session = Depends(get_session),
    runtime: AdminRuntime = Depends(get_runtime),
):
    return await runtime.gym_info_service.save(session.user.id, request)
