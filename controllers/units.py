# controllers/units.py

import asyncio
from typing import List

from controllers.base import ViewController
from models.enums import UnitStatus, UnitType
from repositories.properties import PropertyRepository
from repositories.units import UnitRepository

UNKNOWN_PROPERTY = "N/A"


class UnitsController(ViewController):
    """Units joined with their property's name for display."""

    label = "units"
    search_fields = ("unitNumber", "type")
    form_fields = (
        "unitNumber",
        "propertyId",
        "type",
        "status",
        "floor",
        "area",
        "rentValue",
        "saleValue",
        "ownerId",
        "tenantId",
    )
    form_defaults = {"type": UnitType.apartment.value, "status": UnitStatus.available.value}

    def __init__(self, repository: UnitRepository, properties: PropertyRepository):
        super().__init__(repository)
        self.properties_repository = properties
        self.properties: List[dict] = []

    async def fetch(self) -> List[dict]:
        units, properties = await asyncio.gather(
            self._fetch_with(self.repository.list_all),
            self._fetch_with(self.properties_repository.list_all),
        )
        self.properties = properties
        return self.join(units, properties)

    @staticmethod
    def join(units: List[dict], properties: List[dict]) -> List[dict]:
        names = {p.get("id"): p.get("name") for p in properties}
        return [
            {**unit, "propertyName": names.get(unit.get("propertyId")) or UNKNOWN_PROPERTY}
            for unit in units
        ]

    def property_options(self) -> List[dict]:
        """Choices for the property select in the unit form."""
        return [{"id": p.get("id"), "name": p.get("name")} for p in self.properties]
