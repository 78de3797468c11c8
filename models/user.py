# models/user.py

from typing import List, Optional
from pydantic import BaseModel, Field

from models.enums import Language, Role
from models.base import StoreModel


# ===============================================================
# PRINCIPAL (Supabase Auth identity)
# ===============================================================

class Principal(BaseModel):
    """The authenticated identity returned by Supabase Auth."""

    id: str
    email: Optional[str] = None

    @classmethod
    def from_auth_user(cls, user) -> "Principal":
        return cls(id=str(user.id), email=getattr(user, "email", None))


# ===============================================================
# PROFILE DOCUMENT (users/<principal id>)
# ===============================================================

class ProfileCreate(StoreModel):
    """Written once at sign-up; id is the principal id."""

    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Role = Role.tenant
    linked_properties: List[str] = Field(default_factory=list)
    favorites: List[str] = Field(default_factory=list)
    language: Language = Language.en


class ProfileUpdate(StoreModel):
    """Admin-panel edit of a user."""

    name: Optional[str] = None
    role: Optional[Role] = None
    phone: Optional[str] = None
    language: Optional[Language] = None
