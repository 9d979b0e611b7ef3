# =======================================================================================
# gym_admin/services/auth_service.py - Administrator login and session
# =======================================================================================

import logging
from typing import Optional

from ..backend import BackendClient, parse_response
from ..config import config
from ..models.schemas import AuthUser, LoginRequest
from ..utils.validators import InputValidator

logger = logging.getLogger(__name__)


class Session:
    """
    The signed-in administrator, created once per login and passed to
    whatever needs it. Nothing reads it from a global.
    """

    def __init__(self, user: AuthUser, access_topic: Optional[str] = None):
        self.user = user
        self.access_topic = access_topic or config.ACCESS_TOPIC

    @property
    def first_name(self) -> str:
        return self.user.name.split(" ")[0] if self.user.name else "Admin"


class AuthService:
    """Handles admin authentication against the backend (email/password)."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def login(self, email: str, password: str) -> Session:
        InputValidator.validate_credentials(email, password)
        data = await self.backend.post(
            "/auth/login", json=LoginRequest(email=email.strip(), password=password).model_dump()
        )
        user = parse_response(AuthUser, data)
        logger.info(f"Signed in as {user.email} (id={user.id})")
        return Session(user)
