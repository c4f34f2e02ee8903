# =============================================================================
# core/services/payment_service.py - Payment Business Rules
# =============================================================================
# Arithmetic that runs when a recorded payment is linked to an invoice:
# - Update the invoice's paid amount, balance and status
# - Extend the subscriber's expiry once the invoice is fully paid
#
# The caller loads the invoice/subscriber, calls these functions and writes
# the results back inside one transaction.
# =============================================================================

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

DEFAULT_VALIDITY_DAYS = 30

_CENT = Decimal("0.01")


class InvoiceStatus(str, Enum):
    """Invoice states touched by payment recording."""
    ISSUED = "ISSUED"
    PAID = "PAID"


@dataclass(frozen=True)
class InvoiceBalance:
    """New invoice figures after applying a payment."""
    amount_paid: Decimal
    balance_due: Decimal
    status: InvoiceStatus
    paid_date: datetime | None

    @property
    def is_fully_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class PaymentService:
    """Service for payment-to-invoice arithmetic."""

    @staticmethod
    def apply_to_invoice(
        total,
        amount_paid,
        payment_amount,
        paid_date: datetime | None = None,
        now: datetime | None = None,
    ) -> InvoiceBalance:
        """
        Apply a payment to an invoice.

        Args:
            total: Invoice total
            amount_paid: Amount already paid before this payment
            payment_amount: Amount of the new payment
            paid_date: Existing paid date (kept if still not fully paid)
            now: Current time (defaults to UTC now)

        Returns:
            InvoiceBalance - PAID with paid_date=now when the balance reaches
            zero or below, otherwise ISSUED with the previous paid_date
        """
        now = now or datetime.now(timezone.utc)
        new_paid = _money(amount_paid) + _money(payment_amount)
        balance = _money(total) - new_paid

        if balance <= 0:
            return InvoiceBalance(new_paid, balance, InvoiceStatus.PAID, now)
        return InvoiceBalance(new_paid, balance, InvoiceStatus.ISSUED, paid_date)

    @staticmethod
    def extend_expiry(
        current_expiry: datetime | None,
        validity_days: int | None = None,
        now: datetime | None = None,
    ) -> datetime:
        """
        Compute a subscriber's new expiry after a plan invoice is paid.

        Renewal starts from whichever is later: the current expiry or now,
        so an already-expired account does not get back-dated days.

        Naive datetimes, as most database drivers return them, are taken
        to be UTC.

        Args:
            current_expiry: Subscriber's expiry date, if any
            validity_days: Plan validity (defaults to 30 when missing or 0)
            now: Current time (defaults to UTC now)

        Returns:
            The new expiry datetime, timezone-aware
        """
        now = _as_utc(now or datetime.now(timezone.utc))
        current_expiry = _as_utc(current_expiry) if current_expiry else None
        start = max(current_expiry, now) if current_expiry else now
        return start + timedelta(days=validity_days or DEFAULT_VALIDITY_DAYS)
