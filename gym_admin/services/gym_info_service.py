# =======================================================================================
# gym_admin/services/gym_info_service.py - Facility profile
# =======================================================================================
import logging
from typing import Optional

from ..backend import BackendClient, parse_list, parse_response
from ..models.schemas import CreateGymInfoRequest, GymInfo, GymInfoBody, UpdateGymInfoRequest
from ..utils.validators import InputValidator

logger = logging.getLogger(__name__)


class GymInfoService:
    """
    Reads and saves the gym profile that belongs to an administrator.
    The backend keys profiles by user and returns a list; only the first
    entry is used.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def get(self, user_id: int) -> Optional[GymInfo]:
        data = await self.backend.get("/gym/info", params={"userId": user_id})
        profiles = parse_list(GymInfo, data)
        return profiles[0] if profiles else None

    async def save(self, user_id: int, profile: GymInfoBody) -> GymInfo:
        """Create the profile on first save, update it afterwards."""
        InputValidator.validate_gym_name(profile.name)
        fields = {key: (value or "").strip() for key, value in profile.model_dump().items()}

        current = await self.get(user_id)
        if current is None:
            request = CreateGymInfoRequest(userId=user_id, **fields)
            data = await self.backend.post("/gym/info", json=request.model_dump())
            logger.info(f"Created gym profile for user {user_id}")
        else:
            request = UpdateGymInfoRequest(gymId=current.id, **fields)
            data = await self.backend.put("/gym/info", json=request.model_dump())
            logger.info(f"Updated gym profile {current.id}")
        return parse_response(GymInfo, data)
