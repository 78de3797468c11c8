# controllers/guest_requests.py

from controllers.base import StatusController
from repositories.guest_requests import GuestRequestRepository


class GuestRequestsController(StatusController):
    label = "guest requests"
    search_fields = ("guestEmail", "guestPhone", "requestType")

    def __init__(self, repository: GuestRequestRepository):
        super().__init__(repository)
