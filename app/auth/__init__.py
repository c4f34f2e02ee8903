# =============================================================================
# app/auth/__init__.py - Portal Session Module
# =============================================================================
# Provides cookie-based subscriber sessions for the portal.
#
# Usage:
#   from app.auth import require_portal_session, PortalSession
#
#   @router.get("/protected")
#   async def protected(session: PortalSession = Depends(require_portal_session)):
#       return {"subscriber_id": session.subscriber_id}
# =============================================================================

from app.auth.dependencies import (
    create_portal_token,
    decode_portal_token,
    get_portal_session,
    require_portal_session,
)
from app.auth.models import LogoutResponse, PortalSession

__all__ = [
    "create_portal_token",
    "decode_portal_token",
    "get_portal_session",
    "require_portal_session",
    "LogoutResponse",
    "PortalSession",
]
