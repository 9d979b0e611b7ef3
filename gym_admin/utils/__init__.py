# =======================================================================================
# gym_admin/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .validators import *

__all__ = [
    "GymAdminError", "TransportError", "MessageDecodeError",
    "InputValidationError", "NotAuthenticatedError", "RequestError", "InputValidator"
]
