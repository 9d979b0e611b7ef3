# =======================================================================================
# gym_admin/utils/exceptions.py - Custom Exceptions
# =======================================================================================
from typing import Optional

class GymAdminError(Exception):
    """Base exception for the gym admin client."""
    pass

class TransportError(GymAdminError):
    """Raised when the live stream transport fails or closes unexpectedly."""
    pass

class MessageDecodeError(GymAdminError):
    """Raised when a pushed message cannot be decoded into an access event."""
    pass

class InputValidationError(GymAdminError):
    """Raised when user input is rejected before any request is sent."""
    pass

class NotAuthenticatedError(GymAdminError):
    """Raised when an action needs a session and none is active."""
    pass

class RequestError(GymAdminError):
    """Raised when a backend REST call fails (network, timeout or non-success status)."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
