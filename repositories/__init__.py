# repositories/__init__.py

from core.gateway import RemoteDataGateway

from .base import EntityRepository, shape
from .properties import BlobFile, PropertyRepository
from .units import UnitRepository
from .tickets import TicketRepository
from .payments import PaymentRepository
from .guest_requests import GuestRequestRepository
from .users import UserRepository
from .system_settings import SystemSettingsRepository


class Repositories:
    """One repository per collection, all sharing a single gateway."""

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway
        self.users = UserRepository(gateway)
        self.properties = PropertyRepository(gateway)
        self.units = UnitRepository(gateway)
        self.tickets = TicketRepository(gateway)
        self.payments = PaymentRepository(gateway)
        self.guest_requests = GuestRequestRepository(gateway)
        self.system_settings = SystemSettingsRepository(gateway)


__all__ = [
    "BlobFile",
    "EntityRepository",
    "GuestRequestRepository",
    "PaymentRepository",
    "PropertyRepository",
    "Repositories",
    "SystemSettingsRepository",
    "TicketRepository",
    "UnitRepository",
    "UserRepository",
    "shape",
]
