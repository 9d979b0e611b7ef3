
# =======================================================================================
# gym_admin/models/schemas.py - Pydantic Models
# =======================================================================================
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field
from .enums import SubscriptionStatus, PaymentMethod, AccessType

# ========== Members + Auth ==========
class Member(BaseModel):
    """Gym member as returned by the backend."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

class AuthUser(BaseModel):
    """Administrator returned by a successful login."""
    id: int
    name: str
    email: str

class LoginRequest(BaseModel):
    email: str
    password: str

class LoginResponse(BaseModel):
    user: AuthUser
    message: str

class CreateMemberRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

# ========== Membership plans ==========
class MembershipPlan(BaseModel):
    """Catalog entry. Subscriptions embed it as currently stored, never a frozen copy."""
    id: int
    name: str
    durationDays: int
    price: float
    description: Optional[str] = None

class CreatePlanRequest(BaseModel):
    name: str
    durationDays: int
    price: float
    description: Optional[str] = None

# ========== Subscriptions ==========
class SubscriptionMember(BaseModel):
    id: int
    name: str
    email: Optional[str] = None

class Subscription(BaseModel):
    """A member's binding to a plan. Dates and status come from the server as-is."""
    id: int
    user: SubscriptionMember
    membership: MembershipPlan
    startDate: date
    endDate: date
    autoRenew: bool = False
    status: SubscriptionStatus

class AssignSubscriptionRequest(BaseModel):
    userId: int
    membershipId: int
    autoRenew: bool = False

class AssignPlanBody(BaseModel):
    membershipId: Optional[int] = None
    autoRenew: bool = False

class CurrentSubscriptionResponse(BaseModel):
    subscription: Optional[Subscription] = None
    statusLabel: Optional[str] = None
    suggestedPaymentAmount: Optional[float] = None

# ========== Payments ==========
class Payment(BaseModel):
    id: int
    userId: int
    userMembershipId: Optional[int] = None
    amount: float
    method: PaymentMethod
    reference: Optional[str] = None
    paymentDate: datetime
    createdAt: datetime

class CreatePaymentRequest(BaseModel):
    userId: int
    userMembershipId: Optional[int] = None
    amount: float
    method: PaymentMethod
    reference: Optional[str] = None

class RecordPaymentBody(BaseModel):
    amount: float
    method: str = "CASH"
    reference: Optional[str] = None
    userMembershipId: Optional[int] = None

# ========== Access events ==========
class AccessEvent(BaseModel):
    """Stored access log row returned by the REST API."""
    id: int
    accessTime: datetime
    type: AccessType
    source: Optional[str] = None

class LiveAccessEvent(BaseModel):
    """Access event as pushed on the live topic.

    ``type`` stays a plain string: types other than ENTRY/EXIT still decode
    and are simply ignored downstream.
    """
    id: Optional[int] = None
    userId: Optional[int] = None
    userName: Optional[str] = None
    type: str = Field(..., min_length=1)
    accessTime: Optional[datetime] = None
    source: Optional[str] = None

class RegisterAccessRequest(BaseModel):
    userId: int
    type: AccessType
    source: Optional[str] = None

class RegisterAccessBody(BaseModel):
    type: str
    source: Optional[str] = None

# ========== Dashboard ==========
class OperationalSummary(BaseModel):
    """Aggregate dashboard figures, either a snapshot or a snapshot plus live entries."""
    entriesToday: int = 0
    paymentsTodayAmount: float = 0
    newClientsToday: int = 0
    activeClients: int = 0
    expiringMembershipsNext7Days: int = 0
    paymentsThisMonthAmount: float = 0

class NotificationResponse(BaseModel):
    message: Optional[str] = None

class StreamStatusResponse(BaseModel):
    state: str
    topic: Optional[str] = None
    connected: bool
    connectAttempts: int = 0
    deliveredEvents: int = 0
    droppedMessages: int = 0

# ========== Gym profile ==========
class GymInfo(BaseModel):
    """Facility profile owned by the signed-in administrator."""
    id: int
    name: str
    address: Optional[str] = None
    schedule: Optional[str] = None
    phone: Optional[str] = None
    logoUrl: Optional[str] = None

class GymInfoBody(BaseModel):
    name: str = ""
    address: str = ""
    schedule: str = ""
    phone: str = ""
    logoUrl: str = ""

class CreateGymInfoRequest(GymInfoBody):
    userId: int

class UpdateGymInfoRequest(GymInfoBody):
    gymId: int

# ========== Health ==========
class HealthResponse(BaseModel):
    status: str                 # "ok" | "error"
    authenticated: bool
    stream: Optional[str] = None
    message: Optional[str] = None

# ========== STOMP ==========
class StompFrame(BaseModel):
    """One STOMP frame as sent or received over the WebSocket."""
    command: str
    headers: dict = Field(default_factory=dict)
    body: str = ""
