# =============================================================================
# app/ - Portal HTTP Layer
# =============================================================================
# Everything that knows about HTTP:
# - main.py: FastAPI app, logging, CORS, error handlers
# - config.py: Settings from the environment
# - middleware.py: Request body size cap
# - auth/: Portal session cookie handling
# - routers/: Endpoints, one module per area
#
# Rules about locations, payments and input validation live in core/.
# =============================================================================
