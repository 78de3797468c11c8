# repositories/tickets.py

from core.gateway import Collection
from models.enums import TicketStatus
from models.ticket import TicketCreate, TicketUpdate
from repositories.base import EntityRepository


class TicketRepository(EntityRepository):
    collection = Collection.tickets
    create_model = TicketCreate
    update_model = TicketUpdate

    def update_status(self, doc_id: str, status: TicketStatus) -> dict:
        return self.update(doc_id, {"status": status})
