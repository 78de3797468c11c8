# models/unit.py

from typing import List, Optional
from pydantic import Field, field_validator

from core.utils import clean, parse_float, parse_int
from models.base import StoreModel
from models.enums import UnitStatus, UnitType


# -------------------------------------------------
# Shared numeric parsing
# -------------------------------------------------
# Form inputs arrive as text. Blank → None; anything unparseable is
# rejected (never written as NaN).
class _UnitNumbers(StoreModel):
    floor: Optional[int] = None
    area: Optional[float] = None
    rent_value: Optional[float] = None
    sale_value: Optional[float] = None

    @field_validator("floor", mode="before")
    def parse_floor(cls, v):
        return parse_int(v, "floor")

    @field_validator("area", mode="before")
    def parse_area(cls, v):
        return parse_float(v, "area")

    @field_validator("rent_value", mode="before")
    def parse_rent(cls, v):
        return parse_float(v, "rentValue")

    @field_validator("sale_value", mode="before")
    def parse_sale(cls, v):
        return parse_float(v, "saleValue")


class Coordinates(StoreModel):
    x: float = 0
    y: float = 0
    z: float = 0


# -------------------------------------------------
# Create (modal form)
# -------------------------------------------------
class UnitForm(_UnitNumbers):
    unit_number: str
    property_id: str
    type: UnitType = UnitType.apartment
    status: UnitStatus = UnitStatus.available
    owner_id: Optional[str] = None
    tenant_id: Optional[str] = None

    media: List[str] = Field(default_factory=list)
    coordinates: Coordinates = Field(default_factory=Coordinates)

    @field_validator("unit_number", "property_id", mode="before")
    def required_text(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("required")
        return str(v)

    @field_validator("owner_id", "tenant_id", mode="before")
    def blank_to_none(cls, v):
        return clean(v)


# -------------------------------------------------
# Update (PATCH)
# -------------------------------------------------
class UnitUpdate(_UnitNumbers):
    unit_number: Optional[str] = None
    property_id: Optional[str] = None
    type: Optional[UnitType] = None
    status: Optional[UnitStatus] = None
    owner_id: Optional[str] = None
    tenant_id: Optional[str] = None
    media: Optional[List[str]] = None
    coordinates: Optional[Coordinates] = None

    @field_validator("unit_number", "property_id", mode="before")
    def no_blank_required(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("cannot be blank")
        return str(v)

    @field_validator("owner_id", "tenant_id", mode="before")
    def blank_to_none(cls, v):
        return clean(v)
