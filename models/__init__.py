# -------------------------
# Enums
# -------------------------
from .enums import (
    BaseStrEnum,
    UnitStatus,
    UnitType,
    TicketStatus,
    GuestRequestStatus,
    Role,
    Language,
)

# -------------------------
# Auth / Profile Models
# -------------------------
from .auth import (
    LoginRequest,
    RegisterRequest,
    PasswordResetRequest,
    TokenResponse,
)
from .user import (
    Principal,
    ProfileCreate,
    ProfileUpdate,
)

# -------------------------
# Entity Models
# -------------------------
from .property import PropertyForm, PropertyUpdate
from .unit import UnitForm, UnitUpdate, Coordinates
from .ticket import TicketCreate, TicketUpdate, TicketStatusUpdate
from .payment import PaymentCreate
from .guest_request import GuestRequestCreate, GuestRequestStatusUpdate
from .system_settings import SystemSettings
