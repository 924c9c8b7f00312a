"""Identity models for the secured admin API."""

from pydantic import BaseModel, Field


class StaffIdentity(BaseModel):
    """Identity record a bearer token is issued for."""

    id: str = Field(..., description="Staff member identifier")
    email: str
    role: str = Field(..., description="Role name, e.g. 'admin' or 'staff'")


class TokenClaims(BaseModel):
    """Decoded claims attached to an authenticated request."""

    sub: str
    email: str
    role: str
    exp: int
    iat: int
