# =============================================================================
# core/ - Admin Rules
# =============================================================================
# Input schemas and business rules for the admin side of the portal:
# - models/: Pydantic schemas for admin input validation
# - validation.py: Parse-or-reject entry point and action responses
# - services/: Location and payment rules, admin action runner
#
# Nothing here imports FastAPI. Services raise the errors defined in
# app/exceptions.py so the HTTP layer can render them.
# =============================================================================
