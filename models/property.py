# models/property.py

from typing import Optional
from pydantic import field_validator

from core.utils import clean
from models.base import StoreModel


# -------------------------------------------------
# Create (modal form)
# -------------------------------------------------
class PropertyForm(StoreModel):
    name: str
    city: str
    description: Optional[str] = None
    manager_id: Optional[str] = None

    @field_validator("name", "city", mode="before")
    def required_text(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("required")
        return v

    @field_validator("description", "manager_id", mode="before")
    def blank_to_none(cls, v):
        return clean(v)


# -------------------------------------------------
# Update (PATCH)
# -------------------------------------------------
class PropertyUpdate(StoreModel):
    name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    manager_id: Optional[str] = None

    @field_validator("name", "city", mode="before")
    def no_blank_required(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("cannot be blank")
        return v

    @field_validator("description", "manager_id", mode="before")
    def blank_to_none(cls, v):
        return clean(v)
