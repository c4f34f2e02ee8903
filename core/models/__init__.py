# =============================================================================
# core/models/ - Admin Input Schemas
# =============================================================================
# This package contains Pydantic schemas for admin input validation:
# - location.py: Location create/update schema
# - payment_gateway.py: Payment gateway configuration schema
# - payment.py: Manual payment recording schema
#
# These models define the "contract" between admin forms and persistence.
# Parse them through core.validation.safe_parse to get a structured
# result instead of an exception.
# =============================================================================

# -----------------------------------------------------------------------------
# Location Models
# -----------------------------------------------------------------------------
from .location import (
    CreateLocationInput,
    LocationInput,
    LocationType,
    UpdateLocationInput,
)

# -----------------------------------------------------------------------------
# Payment Gateway Models
# -----------------------------------------------------------------------------
from .payment_gateway import (
    CreatePaymentGatewayInput,
    PaymentGatewayInput,
    PaymentGatewayProvider,
)

# -----------------------------------------------------------------------------
# Payment Models
# -----------------------------------------------------------------------------
from .payment import (
    PaymentInput,
    PaymentMethod,
    PaymentStatus,
    RecordPaymentInput,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Location
    "CreateLocationInput",
    "LocationInput",
    "LocationType",
    "UpdateLocationInput",
    # Payment Gateway
    "CreatePaymentGatewayInput",
    "PaymentGatewayInput",
    "PaymentGatewayProvider",
    # Payment
    "PaymentInput",
    "PaymentMethod",
    "PaymentStatus",
    "RecordPaymentInput",
]
