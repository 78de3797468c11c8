# models/ticket.py

from typing import Optional
from pydantic import field_validator

from core.utils import clean
from models.base import StoreModel
from models.enums import TicketStatus


class TicketCreate(StoreModel):
    category: str
    description: Optional[str] = None
    status: TicketStatus = TicketStatus.open

    @field_validator("category", mode="before")
    def required_text(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("required")
        return v


class TicketUpdate(StoreModel):
    category: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None


class TicketStatusUpdate(StoreModel):
    status: TicketStatus
