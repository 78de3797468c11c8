# repositories/guest_requests.py

from typing import List

from core.gateway import Collection
from models.enums import GuestRequestStatus
from models.guest_request import GuestRequestCreate, GuestRequestStatusUpdate
from repositories.base import EntityRepository


class GuestRequestRepository(EntityRepository):
    collection = Collection.guest_requests
    create_model = GuestRequestCreate
    update_model = GuestRequestStatusUpdate

    def list_all(self) -> List[dict]:
        # Requests written before status existed read as pending.
        documents = super().list_all()
        for document in documents:
            if not document.get("status"):
                document["status"] = GuestRequestStatus.pending.value
        return documents

    def prepare_create(self, document: dict) -> dict:
        document["status"] = GuestRequestStatus.pending.value
        return document

    def update_status(self, doc_id: str, status: GuestRequestStatus) -> dict:
        return self.update(doc_id, {"status": status})
