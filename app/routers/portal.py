# =============================================================================
# app/routers/portal.py - Subscriber Portal Endpoints
# =============================================================================
# Session endpoints for the subscriber-facing portal:
# - POST /logout: clear the portal-token cookie
# - GET /session: return the current session claims
#
# Login lives with the subscriber store and is not part of this service.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Response

from app.auth import LogoutResponse, PortalSession, require_portal_session
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """
    Log the subscriber out of the portal.

    Expires the session cookie at every configured path. The cookie was
    issued under "/portal" by older releases and under "/" now; clearing
    only one would leave the other readable by the browser.

    Always succeeds, with or without an existing cookie, so it is safe to
    call repeatedly.
    """
    for path in settings.portal_cookie_paths_list:
        response.delete_cookie(settings.PORTAL_COOKIE_NAME, path=path)

    logger.info("Portal session cleared")
    return LogoutResponse(success=True)


@router.get("/session", response_model=PortalSession)
async def current_session(
    session: PortalSession = Depends(require_portal_session),
) -> PortalSession:
    """
    Return the signed-in subscriber's session claims.

    Raises:
        401: If the portal-token cookie is missing, expired or invalid
    """
    return session
