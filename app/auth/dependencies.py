# =============================================================================
# app/auth/dependencies.py - Portal Session Dependencies
# =============================================================================
# Reads and writes the subscriber portal session token.
#
# The token is an HS256 JWT stored in the `portal-token` cookie. Any
# problem with it (missing, expired, bad signature, missing claims) is
# treated the same way: there is no session.
#
# Usage:
#   from app.auth import require_portal_session, PortalSession
#
#   @router.get("/portal/tickets")
#   async def tickets(session: PortalSession = Depends(require_portal_session)):
#       return {"subscriber_id": session.subscriber_id}
# =============================================================================

import logging
import time
from typing import Optional

from fastapi import Request
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from app.auth.models import PortalSession
from app.config import settings
from app.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_portal_token(session: PortalSession, expires_in: int | None = None) -> str:
    """
    Sign a portal session into a token.

    Args:
        session: Claims to embed
        expires_in: Lifetime in seconds (defaults to PORTAL_SESSION_HOURS)

    Returns:
        Encoded JWT string suitable for the portal-token cookie
    """
    lifetime = settings.portal_session_seconds if expires_in is None else expires_in
    claims = session.model_dump(by_alias=True)
    claims["exp"] = int(time.time()) + lifetime
    return jwt.encode(claims, settings.PORTAL_JWT_SECRET, algorithm=ALGORITHM)


def decode_portal_token(token: str) -> Optional[PortalSession]:
    """
    Verify a token and return its session, or None if it is not usable.

    Args:
        token: Encoded JWT from the cookie

    Returns:
        PortalSession if the signature, expiry and claims are valid
    """
    try:
        payload = jwt.decode(token, settings.PORTAL_JWT_SECRET, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.debug("Portal token has expired")
        return None
    except JWTError as e:
        logger.debug(f"Portal token rejected: {e}")
        return None

    try:
        return PortalSession.model_validate(payload)
    except ValidationError:
        logger.warning("Portal token is missing session claims")
        return None


async def get_portal_session(request: Request) -> Optional[PortalSession]:
    """
    Optionally get the portal session from the request cookie.

    Returns None if no cookie is present or the token is invalid,
    instead of raising an error.
    """
    token = request.cookies.get(settings.PORTAL_COOKIE_NAME)
    if not token:
        return None
    return decode_portal_token(token)


async def require_portal_session(request: Request) -> PortalSession:
    """
    Get the portal session or fail the request.

    Raises:
        NotAuthenticatedError: 401 if there is no valid session
    """
    session = await get_portal_session(request)
    if session is None:
        raise NotAuthenticatedError()
    return session
