# =======================================================================================
# gym_admin/services/access_service.py - Manual entry/exit registration
# =======================================================================================
from typing import List, Optional

from ..backend import BackendClient, parse_list, parse_response
from ..models.schemas import AccessEvent, RegisterAccessRequest
from ..utils.validators import InputValidator


class AccessService:
    """Registers and lists a member's access events through the REST API."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def register(self, member_id: int, access_type: str, source: Optional[str] = None) -> AccessEvent:
        """
        Record an ENTRY or EXIT for a member. The backend broadcasts the new
        event on the live topic, so the dashboard is updated through the
        stream rather than from here.
        """
        request = RegisterAccessRequest(
            userId=member_id,
            type=InputValidator.validate_access_type(access_type),
            source=InputValidator.clean_reference(source),
        )
        data = await self.backend.post("/access", json=request.model_dump(exclude_none=True))
        return parse_response(AccessEvent, data)

    async def list_for_member(self, member_id: int) -> List[AccessEvent]:
        data = await self.backend.get(f"/access/user/{member_id}")
        return parse_list(AccessEvent, data)
