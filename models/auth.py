from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from models.enums import Role


# -----------------------------------------------------
# LOGIN REQUEST (Supabase email/password)
# -----------------------------------------------------
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# -----------------------------------------------------
# REGISTER REQUEST
# -----------------------------------------------------
class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

    name: str
    phone: Optional[str] = None
    role: Role = Role.tenant

    # Admins are appointed from the admin panel, never self-registered.
    @field_validator("role")
    def no_self_service_admin(cls, v):
        if v is Role.admin:
            raise ValueError("admin accounts cannot be self-registered")
        return v


class PasswordResetRequest(BaseModel):
    email: EmailStr


# -----------------------------------------------------
# TOKEN RESPONSE (Supabase session JWT)
# -----------------------------------------------------
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    profile: Optional[dict] = None
