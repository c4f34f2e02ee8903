# =============================================================================
# core/models/payment.py - Payment Schemas
# =============================================================================
# Input schema for recording a subscriber payment (cash collection, UPI,
# bank transfer, ...).
#
# The schema does not check that invoiceId belongs to subscriberId; that
# is enforced where the invoice is loaded.
# =============================================================================

import math
from enum import Enum

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from .base import InputSchema, check_uuid, reject_null

AMOUNT_MESSAGE = "Amount must be positive"


class PaymentMethod(str, Enum):
    """How the subscriber paid."""
    CASH = "CASH"
    UPI = "UPI"
    CARD = "CARD"
    BANK_TRANSFER = "BANK_TRANSFER"
    PAYMENT_GATEWAY = "PAYMENT_GATEWAY"
    VOUCHER = "VOUCHER"


class PaymentStatus(str, Enum):
    """
    Lifecycle state of a payment.

    Manually recorded payments are COMPLETED unless stated otherwise.
    """
    COMPLETED = "COMPLETED"
    PENDING = "PENDING"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PaymentInput(InputSchema):
    """
    Schema for recording a payment.

    Example:
        {
            "subscriberId": "550e8400-e29b-41d4-a716-446655440000",
            "amount": "499.00",
            "method": "UPI",
            "transactionId": "UPI-2024-0001"
        }
    """

    subscriber_id: str = Field(
        ...,
        alias="subscriberId",
        description="UUID of the paying subscriber"
    )

    invoice_id: str | None = Field(
        default=None,
        alias="invoiceId",
        description="UUID of the invoice this payment settles"
    )

    # Form inputs arrive as strings; coerced in the before-validator
    amount: float = Field(
        ...,
        description="Amount paid, strictly positive"
    )

    method: PaymentMethod = Field(
        ...,
        description="Payment method"
    )

    transaction_id: str | None = Field(
        default=None,
        alias="transactionId",
        description="External transaction or reference number"
    )

    notes: str | None = Field(
        default=None,
        description="Free-form notes from the collector"
    )

    status: PaymentStatus = Field(
        default=PaymentStatus.COMPLETED,
        description="Payment status; COMPLETED when omitted"
    )

    @field_validator("subscriber_id", mode="before")
    @classmethod
    def _subscriber_id_is_uuid(cls, value):
        if not isinstance(value, str):
            raise PydanticCustomError("invalid_uuid", "Invalid subscriber")
        return check_uuid(value, "Invalid subscriber")

    @field_validator("invoice_id", mode="before")
    @classmethod
    def _invoice_id_is_uuid(cls, value):
        if not isinstance(value, str):
            raise PydanticCustomError("invalid_uuid", "Invalid invoice")
        return check_uuid(value, "Invalid invoice")

    @field_validator("transaction_id", "notes", mode="before")
    @classmethod
    def _optional_text_not_null(cls, value):
        return reject_null(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value) -> float:
        """
        Coerce numbers and numeric strings to float.

        Anything that does not become a finite number greater than zero,
        including "", "abc", None and 0, is rejected with one message.
        """
        if value is None:
            number = 0.0
        elif isinstance(value, str):
            text = value.strip()
            try:
                number = float(text) if text else 0.0
            except ValueError:
                number = math.nan
        else:
            try:
                number = float(value)
            except (TypeError, ValueError, OverflowError):
                number = math.nan

        if not math.isfinite(number) or number <= 0:
            raise PydanticCustomError("too_small", AMOUNT_MESSAGE)
        return number


RecordPaymentInput = PaymentInput
