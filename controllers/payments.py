# controllers/payments.py

from controllers.base import Draft, ViewController
from core.errors import ReadOnlyCollection
from repositories.payments import PaymentRepository


class PaymentsController(ViewController):
    """Read-only ledger view."""

    label = "payments"
    search_fields = ("type", "method")
    form_fields = ("type", "amount", "method", "timestamp")

    def __init__(self, repository: PaymentRepository):
        super().__init__(repository)

    def open_edit(self, doc_id: str) -> Draft:
        raise ReadOnlyCollection(self.label, "update")

    async def delete(self, doc_id: str, confirmed: bool = False) -> None:
        raise ReadOnlyCollection(self.label, "delete")
