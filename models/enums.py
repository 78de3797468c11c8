from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# UNIT STATUS
# -----------------------------------------------------
class UnitStatus(BaseStrEnum):
    """Market state of a unit."""

    available = "available"
    occupied = "occupied"
    for_rent = "forRent"
    for_sale = "forSale"


# -----------------------------------------------------
# UNIT TYPE
# -----------------------------------------------------
class UnitType(BaseStrEnum):
    apartment = "apartment"
    villa = "villa"
    office = "office"
    shop = "shop"
    warehouse = "warehouse"


# -----------------------------------------------------
# TICKET STATUS
# -----------------------------------------------------
class TicketStatus(BaseStrEnum):
    """Workflow state for a maintenance ticket."""

    open = "open"
    assigned = "assigned"
    in_progress = "inProgress"
    completed = "completed"
    closed = "closed"


# -----------------------------------------------------
# GUEST REQUEST STATUS
# -----------------------------------------------------
class GuestRequestStatus(BaseStrEnum):
    pending = "pending"
    contacted = "contacted"
    completed = "completed"


# -----------------------------------------------------
# ROLES (closed set; admin satisfies every role check)
# -----------------------------------------------------
class Role(BaseStrEnum):
    admin = "admin"
    manager = "manager"
    owner = "owner"
    tenant = "tenant"
    provider = "provider"


# -----------------------------------------------------
# UI LANGUAGE
# -----------------------------------------------------
class Language(BaseStrEnum):
    en = "en"
    ar = "ar"
