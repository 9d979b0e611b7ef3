# =======================================================================================
# gym_admin/services/member_service.py - Member and Plan Catalog Wrappers
# =======================================================================================
from typing import List, Optional

from ..backend import BackendClient, parse_list, parse_response
from ..models.schemas import CreateMemberRequest, CreatePlanRequest, Member, MembershipPlan
from ..utils.validators import InputValidator


class MemberService:
    """Plain request/response wrappers for members."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def list_members(self) -> List[Member]:
        data = await self.backend.get("/users")
        return parse_list(Member, data)

    async def create_member(
        self,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Member:
        InputValidator.validate_new_member(name)
        request = CreateMemberRequest(
            name=name.strip(),
            email=InputValidator.clean_reference(email),
            phone=InputValidator.clean_reference(phone),
            password=password or None,
        )
        data = await self.backend.post("/auth/register", json=request.model_dump())
        return parse_response(Member, data)


class MembershipCatalogService:
    """Plain request/response wrappers for the membership plan catalog."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def list_plans(self) -> List[MembershipPlan]:
        data = await self.backend.get("/memberships")
        return parse_list(MembershipPlan, data)

    async def create_plan(
        self, name: str, duration_days: int, price: float, description: Optional[str] = None
    ) -> MembershipPlan:
        InputValidator.validate_new_plan(name, duration_days, price)
        request = CreatePlanRequest(
            name=name.strip(),
            durationDays=duration_days,
            price=price,
            description=InputValidator.clean_reference(description),
        )
        data = await self.backend.post("/memberships", json=request.model_dump())
        return parse_response(MembershipPlan, data)
