# repositories/units.py

from core.errors import PayloadError
from core.gateway import Collection
from models.unit import UnitForm, UnitUpdate
from repositories.base import EntityRepository


class UnitRepository(EntityRepository):
    """
    Units belong to a property through ``propertyId``. The store does not
    enforce the reference, so it is checked here on every write that sets it.
    """

    collection = Collection.units
    create_model = UnitForm
    update_model = UnitUpdate

    def _require_property(self, property_id: str):
        if self.gateway.get_one(Collection.properties, property_id) is None:
            raise PayloadError(
                f"propertyId {property_id!r} does not reference an existing property",
                field="propertyId",
            )

    def prepare_create(self, document: dict) -> dict:
        self._require_property(document["propertyId"])
        return document

    def prepare_update(self, doc_id: str, changes: dict) -> dict:
        if "propertyId" in changes:
            self._require_property(changes["propertyId"])
        return changes
