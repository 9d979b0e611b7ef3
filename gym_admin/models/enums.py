# =======================================================================================
# gym_admin/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum
from typing import Literal

# Type aliases for better type hints
SubscriptionStatus = Literal["ACTIVE", "EXPIRED", "CANCELLED"]
PaymentMethod = Literal["CASH", "CARD", "TRANSFER", "OTHER"]
AccessType = Literal["ENTRY", "EXIT"]

PAYMENT_METHODS = ("CASH", "CARD", "TRANSFER", "OTHER")
ACCESS_TYPES = ("ENTRY", "EXIT")

class StreamState(Enum):
    """Lifecycle states of the live access-event stream."""
    DISCONNECTED = "DISCONNECTED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    RECONNECTING = "RECONNECTING"
    CLOSED = "CLOSED"

class StompCommand(Enum):
    """STOMP frame commands used by the stream client."""
    CONNECT = "CONNECT"
    CONNECTED = "CONNECTED"
    SUBSCRIBE = "SUBSCRIBE"
    DISCONNECT = "DISCONNECT"
    MESSAGE = "MESSAGE"
    ERROR = "ERROR"
