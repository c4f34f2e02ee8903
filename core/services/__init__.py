# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .action_service import run_action
from .location_service import LocationService
from .payment_service import InvoiceBalance, InvoiceStatus, PaymentService

__all__ = [
    "run_action",
    "LocationService",
    "InvoiceBalance",
    "InvoiceStatus",
    "PaymentService",
]
