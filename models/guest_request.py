# models/guest_request.py

from typing import Optional
from pydantic import EmailStr, field_validator

from core.utils import clean
from models.base import StoreModel
from models.enums import GuestRequestStatus


class GuestRequestCreate(StoreModel):
    """Submitted by anonymous visitors from the landing page."""

    guest_email: EmailStr
    guest_phone: Optional[str] = None
    request_type: str
    message: Optional[str] = None

    @field_validator("request_type", mode="before")
    def required_text(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("required")
        return v


class GuestRequestStatusUpdate(StoreModel):
    status: GuestRequestStatus
