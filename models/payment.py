# models/payment.py

from datetime import datetime
from typing import Optional
from pydantic import field_validator

from core.utils import clean, parse_float
from models.base import StoreModel


class PaymentCreate(StoreModel):
    """Payments are append-only: there is no update model."""

    type: str
    amount: float
    method: Optional[str] = None
    timestamp: Optional[datetime] = None

    @field_validator("type", mode="before")
    def required_text(cls, v):
        v = clean(v)
        if v is None:
            raise ValueError("required")
        return v

    @field_validator("amount", mode="before")
    def parse_amount(cls, v):
        amount = parse_float(v, "amount")
        if amount is None:
            raise ValueError("required")
        return amount

    @field_validator("method", mode="before")
    def blank_to_none(cls, v):
        return clean(v)

    @field_validator("timestamp", mode="before")
    def parse_timestamp(cls, v):
        v = clean(v)
        if isinstance(v, str) and v.endswith("Z"):
            return v.replace("Z", "+00:00")
        return v
