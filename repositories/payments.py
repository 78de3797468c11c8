# repositories/payments.py

from core.errors import ReadOnlyCollection
from core.gateway import Collection
from core.utils import utc_now_iso
from models.payment import PaymentCreate
from repositories.base import EntityRepository, Payload


class PaymentRepository(EntityRepository):
    """Append-only ledger: payments are recorded, never edited or removed."""

    collection = Collection.payments
    create_model = PaymentCreate
    update_model = PaymentCreate

    def prepare_create(self, document: dict) -> dict:
        if not document.get("timestamp"):
            document["timestamp"] = utc_now_iso()
        return document

    def update(self, doc_id: str, payload: Payload) -> dict:
        raise ReadOnlyCollection(str(self.collection), "update")

    def delete(self, doc_id: str) -> None:
        raise ReadOnlyCollection(str(self.collection), "delete")
