# =============================================================================
# app/routers/ - Endpoints
# =============================================================================
# - portal.py: Subscriber portal session endpoints (logout, session)
#
# main.py mounts portal.router under /api/portal.
# =============================================================================

from . import portal

__all__ = [
    "portal",
]
