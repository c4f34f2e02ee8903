# =============================================================================
# app/auth/models.py - Portal Session Models
# =============================================================================
# Pydantic models for the subscriber portal session.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class PortalSession(BaseModel):
    """
    Authenticated subscriber extracted from the portal-token cookie.

    This is the claim set signed into the token at login; nothing here
    requires a database lookup.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subscriber_id: str = Field(..., alias="subscriberId")
    tenant_id: str = Field(..., alias="tenantId")
    tenant_slug: str = Field(..., alias="tenantSlug")
    username: str
    name: str


class LogoutResponse(BaseModel):
    """Response body of POST /api/portal/logout."""
    success: bool = True
