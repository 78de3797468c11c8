# controllers/tickets.py

from controllers.base import StatusController
from models.enums import TicketStatus
from repositories.tickets import TicketRepository


class TicketsController(StatusController):
    label = "tickets"
    search_fields = ("category", "status")
    form_fields = ("category", "description", "status")
    form_defaults = {"status": TicketStatus.open.value}

    def __init__(self, repository: TicketRepository):
        super().__init__(repository)
