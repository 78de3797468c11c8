from .base import CancellationToken, Draft, StatusController, ViewController
from .properties import PropertiesController
from .units import UnitsController
from .tickets import TicketsController
from .payments import PaymentsController
from .guest_requests import GuestRequestsController
from .users import UsersController
from .analytics import AnalyticsController
from .dashboard import DashboardController
from .landing import LandingController

__all__ = [
    "AnalyticsController",
    "CancellationToken",
    "DashboardController",
    "Draft",
    "GuestRequestsController",
    "LandingController",
    "PaymentsController",
    "PropertiesController",
    "StatusController",
    "TicketsController",
    "UnitsController",
    "UsersController",
    "ViewController",
]
