# models/system_settings.py

from pydantic import EmailStr, Field, field_validator

from core.utils import parse_float
from models.base import StoreModel


class SystemSettings(StoreModel):
    """Commission, fees and contact details shown across the admin panel."""

    commission_rate: float = Field(5.0, ge=0, le=100, description="Percent")
    rent_collection_fee: float = Field(2.0, ge=0, le=100, description="Percent")
    maintenance_fee: float = Field(10.0, ge=0, description="Flat amount")
    system_email: EmailStr = "admin@skyproperties.com"
    system_phone: str = "+1234567890"

    @field_validator("commission_rate", "rent_collection_fee", "maintenance_fee", mode="before")
    def parse_numbers(cls, v, info):
        parsed = parse_float(v, info.field_name)
        if parsed is None:
            raise ValueError("required")
        return parsed
